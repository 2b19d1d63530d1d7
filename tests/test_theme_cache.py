import pytest

from hct_theme.theme import MaterialContrast, MaterialTheme
from hct_theme.theme_cache import ThemeCache

SEED = 0xFF63A002


@pytest.fixture
def cache():
    c = ThemeCache()
    yield c
    c.close()


def test_standard_theme_is_cached(cache):
    first = cache.get(SEED, False, MaterialContrast.STANDARD)
    second = cache.get(SEED, False, MaterialContrast.STANDARD)
    assert first is second
    assert first.colors == second.colors
    assert (SEED, False) in cache
    assert (SEED, True) not in cache
    assert len(cache) == 1


def test_light_and_dark_are_separate(cache):
    light = cache.get(SEED, False)
    dark = cache.get(SEED, True)
    assert not light.is_dark_mode and dark.is_dark_mode
    assert len(cache) == 2


def test_medium_contrast_is_derived_not_stored(cache):
    medium = cache.get(SEED, False, MaterialContrast.MEDIUM)
    assert medium.contrast is MaterialContrast.MEDIUM
    assert len(cache) == 1
    manual = MaterialTheme.create(SEED, False, MaterialContrast.STANDARD).with_contrast(
        MaterialContrast.MEDIUM
    )
    assert medium.colors == manual.colors
    assert medium is not cache.get(SEED, False, MaterialContrast.MEDIUM)


def test_high_contrast_matches_direct_build(cache):
    high = cache.get(SEED, True, "high")
    assert high.colors == MaterialTheme.create(SEED, True, MaterialContrast.HIGH).colors


def test_unknown_contrast_falls_back_to_standard(cache):
    theme = cache.get(SEED, False, "ultra")
    assert theme is cache.get(SEED, False)


def test_get_from_rgba_hex(cache):
    theme = cache.get_from_rgba_hex("#63A002FF", False, MaterialContrast.STANDARD)
    assert theme.primary.to_rgb_hex() == "#4C662B"
    assert (SEED, False) in cache


def test_get_from_rgba_hex_rejects_bad_input(cache):
    with pytest.raises(ValueError):
        cache.get_from_rgba_hex("not a color")
    assert len(cache) == 0


def test_clear(cache):
    cache.get(SEED, False)
    cache.clear()
    assert len(cache) == 0
    assert (SEED, False) not in cache


def test_instances_are_isolated():
    a, b = ThemeCache(), ThemeCache()
    a.get(SEED, False)
    assert len(a) == 1
    assert len(b) == 0


def test_close_ends_lifecycle():
    cache = ThemeCache()
    cache.get(SEED, False)
    cache.close()
    assert cache.closed
    assert len(cache) == 0
    with pytest.raises(RuntimeError):
        cache.get(SEED, False)
    cache.close()


def test_context_manager_closes():
    with ThemeCache() as cache:
        cache.get(SEED, False)
    assert cache.closed
