from portfolio_cms.models.settings_blobs import (
    HeroSettings,
    SEOSettings,
    StatsSettings,
    load_setting,
    load_setting_with_defaults,
)


def test_hero_defaults():
    hero = HeroSettings()
    assert hero.cta_primary == "View My Work"
    assert hero.cta_secondary == "Get In Touch"


def test_stats_defaults():
    labels = [item.label for item in StatsSettings().items]
    assert labels == [
        "Years Experience",
        "Projects Completed",
        "Happy Clients",
        "Awards Won",
    ]


def test_load_setting_absent_is_none():
    assert load_setting("hero", None) is None


def test_load_setting_unknown_key_is_none():
    assert load_setting("not-a-setting", {"a": 1}) is None


def test_malformed_blob_falls_back_to_defaults():
    assert load_setting("stats", {"items": "lots"}) is None
    assert load_setting_with_defaults("stats", {"items": "lots"}) == StatsSettings()


def test_null_fields_take_defaults():
    hero = load_setting("hero", {"name": "Ann", "cta_primary": None})
    assert hero.name == "Ann"
    assert hero.cta_primary == "View My Work"


def test_seo_global_block_round_trips_under_its_alias():
    seo = SEOSettings.model_validate({"global": {"site_name": "Site"}})
    assert seo.global_.site_name == "Site"
    assert seo.to_storage()["global"]["site_name"] == "Site"
