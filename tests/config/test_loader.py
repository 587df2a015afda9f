import pytest

from jsoncall import ConfigError, ExecutionContext, JsonCallConfig, default_context_factory


def make_context():
    return ExecutionContext(run_id="from-config")


def test_defaults():
    config = JsonCallConfig.default()
    assert config.context_factory is None
    assert config.normalize is False
    assert config.resolve_context_factory() is default_context_factory


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = JsonCallConfig.from_yaml(tmp_path / "absent.yml")
    assert config == JsonCallConfig.default()


def test_empty_file_falls_back_to_defaults(config_file):
    assert JsonCallConfig.from_yaml(config_file("")) == JsonCallConfig.default()


def test_from_yaml(config_file):
    path = config_file(
        "context_factory: tests_config_helpers:make_context\n"
        "normalize: true\n"
    )
    config = JsonCallConfig.from_yaml(path)
    assert config.context_factory == "tests_config_helpers:make_context"
    assert config.normalize is True


def test_resolve_context_factory():
    config = JsonCallConfig(context_factory=f"{__name__}:make_context")
    factory = config.resolve_context_factory()
    assert factory().run_id == "from-config"
    assert config.to_options().context_factory is factory


def test_unknown_keys_are_ignored():
    config = JsonCallConfig.from_dict({"normalize": True, "colour": "blue"})
    assert config.normalize is True


@pytest.mark.parametrize("data", [
    {"context_factory": "no_colon_here"},
    {"context_factory": 42},
    {"normalize": "yes"},
])
def test_invalid_values(data):
    with pytest.raises(ConfigError) as exc_info:
        JsonCallConfig.from_dict(data)
    assert exc_info.value.error_code == "INVALID_CONFIG"


def test_non_mapping_yaml(config_file):
    with pytest.raises(ConfigError):
        JsonCallConfig.from_yaml(config_file("- a\n- b\n"))


def test_invalid_yaml(config_file):
    with pytest.raises(ConfigError):
        JsonCallConfig.from_yaml(config_file("normalize: [unclosed\n"))


def test_unimportable_factory():
    config = JsonCallConfig(context_factory="does_not_exist_module:factory")
    with pytest.raises(ConfigError):
        config.resolve_context_factory()


def test_factory_attribute_must_be_callable():
    config = JsonCallConfig(context_factory=f"{__name__}:__doc__")
    with pytest.raises(ConfigError):
        config.resolve_context_factory()


def test_to_dict_round_trip():
    config = JsonCallConfig(context_factory="pkg.mod:fn", normalize=True)
    assert JsonCallConfig.from_dict(config.to_dict()) == config
