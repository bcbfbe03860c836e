import pytest

from notefall.platform_types import DEFAULT_PLATFORM_TYPES, PlatformTypeDef, PlatformTypeRegistry


def test_default_catalog_has_five_keys():
    registry = PlatformTypeRegistry()
    assert registry.keys() == ['1', '2', '3', '4', '5']
    assert len(registry) == len(DEFAULT_PLATFORM_TYPES)


def test_plain_tiers_rise_in_pitch_and_bounce():
    registry = PlatformTypeRegistry()
    tiers = [registry.lookup(k) for k in ('1', '2', '3')]
    assert all(t.is_plain for t in tiers)
    assert [t.note_frequency for t in tiers] == sorted(t.note_frequency for t in tiers)
    assert [t.restitution for t in tiers] == [0.5, 0.7, 0.9]


def test_special_variants():
    registry = PlatformTypeRegistry()
    booster = registry.lookup('4')
    fragile = registry.lookup('5')
    assert booster.is_accelerator and not booster.is_temporary
    assert booster.boost_factor > 0
    assert fragile.is_temporary and not fragile.is_accelerator
    assert fragile.max_hits == 3


def test_lookup_missing_key_returns_none():
    registry = PlatformTypeRegistry()
    assert registry.lookup('9') is None
    assert '9' not in registry


def test_register_new_variant():
    registry = PlatformTypeRegistry()
    registry.register(PlatformTypeDef('6', 'bass', (10, 20, 30), 130.81, 0.3))
    assert registry.lookup('6').note_frequency == 130.81
    assert '6' in registry


@pytest.mark.parametrize("kwargs", [
    dict(note_frequency=0),
    dict(restitution=1.5),
    dict(is_accelerator=True, boost_factor=0),
    dict(is_temporary=True, max_hits=0),
    dict(is_accelerator=True, boost_factor=1.0, is_temporary=True, max_hits=2),
])
def test_invalid_definitions_rejected(kwargs):
    params = dict(key='x', name='bad', color=(0, 0, 0), note_frequency=440.0, restitution=0.5)
    params.update(kwargs)
    with pytest.raises(ValueError):
        PlatformTypeDef(**params)
