import pytest

from trispace.effects import EffectPool, EffectType
from trispace.util import Vec3


def test_create_explosion_uses_first_slot():
    pool = EffectPool(4)
    assert pool.create(Vec3(1, 2, 3), EffectType.EXPLOSION) is True
    active = pool.active()
    assert len(active) == 1
    assert active[0] is pool.effects[0]
    assert active[0].position == Vec3(1, 2, 3)
    assert active[0].life == 800
    assert active[0].frame_index == 0


def test_sparks_start_on_second_row():
    pool = EffectPool(1)
    pool.create(Vec3(), EffectType.SPARKS)
    effect = pool.active()[0]
    assert effect.frame_index == effect.start_frame == 8
    assert effect.texture_offset() == (0, 32)


def test_pool_full_rejects_new_effect():
    pool = EffectPool(2)
    assert pool.create(Vec3(), EffectType.EXPLOSION)
    assert pool.create(Vec3(), EffectType.SPARKS)
    assert pool.create(Vec3(), EffectType.EXPLOSION) is False
    assert len(pool.active()) == 2


def test_default_capacity():
    pool = EffectPool()
    created = [pool.create(Vec3(), EffectType.SPARKS) for _ in range(65)]
    assert created.count(True) == 64
    assert created[-1] is False


@pytest.mark.parametrize("effect_type", list(EffectType))
def test_frames_advance_within_range(effect_type):
    pool = EffectPool(1)
    pool.create(Vec3(), effect_type)
    effect = pool.effects[0]
    last = effect.frame_index
    while effect.alive:
        pool.calc(10)
        assert effect.start_frame <= effect.frame_index <= effect.start_frame + effect.frames - 1
        assert effect.frame_index >= last
        last = effect.frame_index
    assert last == effect.start_frame + effect.frames - 1


def test_overshoot_clears_life_and_frees_slot():
    pool = EffectPool(1)
    pool.create(Vec3(), EffectType.EXPLOSION)
    pool.calc(850)
    effect = pool.effects[0]
    assert effect.life == 0
    assert pool.active() == []
    assert pool.create(Vec3(5, 5, 5), EffectType.SPARKS)
    assert pool.active()[0].position == Vec3(5, 5, 5)


def test_calc_leaves_dead_effects_untouched():
    pool = EffectPool(2)
    pool.create(Vec3(), EffectType.EXPLOSION)
    pool.calc(100)
    assert pool.effects[1].life == 0
    assert pool.effects[0].life == 700