import pytest

from ffge.editor import CURSOR_STEP, NO_SELECTION, Editor, EditorMode
from ffge.enemy import create_enemies
from ffge.player import create_players


@pytest.fixture
def editor():
    return Editor(debounce_ms=0)


@pytest.fixture
def world():
    return create_players(), create_enemies()


def test_initial_state(editor):
    assert editor.mode is EditorMode.NONE
    assert editor.selected_entity == NO_SELECTION
    assert editor.cursor == (100, 100)
    assert editor.is_active is False


def test_toggle_on_and_off(editor):
    editor.toggle()
    assert editor.is_active is True
    assert editor.mode is EditorMode.STAGE
    editor.toggle()
    assert editor.is_active is False
    assert editor.mode is EditorMode.NONE
    assert editor.selected_entity == NO_SELECTION


def test_inactive_update_ignores_input(editor, world):
    players, enemies = world
    editor.update({"tab", "left", "return"}, players, enemies)
    assert editor.cursor == (100, 100)
    assert editor.mode is EditorMode.NONE


def test_tab_cycles_modes(editor, world):
    players, enemies = world
    editor.toggle()
    modes = []
    for _ in range(4):
        editor.update({"tab"}, players, enemies)
        modes.append(editor.mode)
    assert modes == [EditorMode.PLAYER, EditorMode.ENEMY, EditorMode.NONE, EditorMode.STAGE]


def test_cursor_moves(editor, world):
    players, enemies = world
    editor.toggle()
    editor.update({"left", "down"}, players, enemies)
    assert editor.cursor == (100 - CURSOR_STEP, 100 + CURSOR_STEP)


def test_select_and_drag_player(editor, world):
    players, enemies = world
    editor.toggle()
    editor.update({"tab"}, players, enemies)
    editor.update({"return"}, players, enemies)
    assert editor.selected_entity == 1
    assert (players[0].x, players[0].y) == editor.cursor
    editor.update({"right"}, players, enemies)
    assert (players[0].x, players[0].y) == editor.cursor
    assert players[1].x == 350


def test_select_and_drag_enemy(editor, world):
    players, enemies = world
    editor.toggle()
    editor.update({"tab"}, players, enemies)
    editor.update({"tab"}, players, enemies)
    editor.update({"return", "up"}, players, enemies)
    assert editor.selected_entity == 0
    assert (enemies[0].x, enemies[0].y) == editor.cursor
    assert enemies[1].x == 280


def test_enter_in_stage_mode_clears_selection(editor, world):
    players, enemies = world
    editor.toggle()
    editor.selected_entity = 2
    editor.update({"return"}, players, enemies)
    assert editor.selected_entity == NO_SELECTION


def test_status_lines(editor, world):
    players, enemies = world
    assert editor.status_lines() == []
    editor.toggle()
    assert editor.status_lines() == ["EDITOR ATIVO [STAGE]"]
    editor.update({"tab"}, players, enemies)
    editor.update({"return"}, players, enemies)
    assert editor.status_lines() == [
        "EDITOR ATIVO [PLAYER]",
        "Entidade selecionada: 1",
    ]