"""
Tests for the synthetic fallback catalog
"""
from app.services.fallback_data import POPULAR_MODS, build_fallback_mods


def test_same_seed_same_output():
    assert build_fallback_mods("CurseForge", seed=7) == build_fallback_mods("CurseForge", seed=7)


def test_different_seed_different_output():
    assert build_fallback_mods("CurseForge", seed=1) != build_fallback_mods("CurseForge", seed=2)


def test_non_empty_and_labelled():
    mods = build_fallback_mods("Modrinth")

    assert len(mods) > len(POPULAR_MODS)
    assert {m.source for m in mods} == {"Modrinth"}
    assert all(m.source_url.startswith("https://modrinth.com/mod/") for m in mods)


def test_starts_with_well_known_mods():
    mods = build_fallback_mods("CurseForge")
    assert [m.name for m in mods[:len(POPULAR_MODS)]] == [p[0] for p in POPULAR_MODS]
    assert all(m.download_count >= 0 for m in mods)
