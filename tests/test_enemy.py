import pytest

from ffge.config import MAX_ENEMIES
from ffge.enemy import (
    LEFT_BOUND,
    RIGHT_BOUND,
    STATE_PATROL,
    STATE_RETURN,
    Enemy,
    create_enemies,
    update_enemies,
)


@pytest.fixture
def enemies():
    return create_enemies()


def test_create_enemies_count_and_names(enemies):
    assert len(enemies) == MAX_ENEMIES
    assert [e.name for e in enemies] == [f"Enemy{i + 1}" for i in range(MAX_ENEMIES)]
    assert [e.index for e in enemies] == list(range(MAX_ENEMIES))


def test_create_enemies_positions(enemies):
    assert enemies[0].x == 200
    assert all(e.y == 300 for e in enemies)
    for left, right in zip(enemies, enemies[1:]):
        assert right.x - left.x == 80


def test_enemy_defaults(enemies):
    for enemy in enemies:
        assert enemy.hp == 100
        assert enemy.state == STATE_PATROL
        assert enemy.sprite_color == (128, 0, 0)


def test_first_step_direction_alternates(enemies):
    starts = [e.x for e in enemies]
    update_enemies(enemies)
    for enemy, start in zip(enemies, starts):
        if enemy.index % 2 == 0:
            assert enemy.x == start + 1
        else:
            assert enemy.x == start - 1


def test_even_enemy_turns_at_right_bound():
    enemy = Enemy(index=0, name="E", x=RIGHT_BOUND, y=0)
    enemy.update()
    assert enemy.x == RIGHT_BOUND + 1
    assert enemy.state == STATE_RETURN
    enemy.update()
    assert enemy.x == RIGHT_BOUND
    assert enemy.state == STATE_RETURN


def test_even_enemy_turns_at_left_bound():
    enemy = Enemy(index=0, name="E", x=LEFT_BOUND, y=0, state=STATE_RETURN)
    enemy.update()
    assert enemy.x == LEFT_BOUND - 1
    assert enemy.state == STATE_PATROL


def test_odd_enemy_turns_at_left_bound():
    enemy = Enemy(index=1, name="E", x=LEFT_BOUND, y=0)
    enemy.update()
    assert enemy.x == LEFT_BOUND - 1
    assert enemy.state == STATE_RETURN
    enemy.update()
    assert enemy.x == LEFT_BOUND


def test_enemies_stay_near_bounds_over_time(enemies):
    for _ in range(2000):
        update_enemies(enemies)
        for enemy in enemies:
            assert LEFT_BOUND - 1 <= enemy.x <= RIGHT_BOUND + 1


def test_enemies_visit_both_states(enemies):
    seen = {e.index: set() for e in enemies}
    for _ in range(1000):
        update_enemies(enemies)
        for enemy in enemies:
            seen[enemy.index].add(enemy.state)
    assert all(states == {STATE_PATROL, STATE_RETURN} for states in seen.values())