"""
Tests for the YAML configuration loader.
"""

import pytest
import yaml

from rlevector import RleVector
from rlevector.config import (
    VectorConfig,
    clear_config_cache,
    get_default_config,
    get_vector_config,
    load_config,
)
from rlevector.config import loader
from rlevector.validation import ConfigError


def write_config(directory, content):
    path = directory / 'rlevector.yaml'
    path.write_text(yaml.safe_dump(content))
    return path


class TestLoadConfig:

    def test_repository_defaults(self):
        """The shipped rlevector.yaml carries the default tolerances."""
        config = load_config()
        assert config['tolerance']['rtol'] == pytest.approx(1e-9)
        assert config['tolerance']['atol'] == pytest.approx(1e-12)
        assert config['display']['max_runs'] == 50

    def test_profile_overrides_section_keys(self, tmp_path, monkeypatch):
        """A profile overrides single keys and keeps the rest of the section."""
        write_config(tmp_path, {
            'defaults': {'tolerance': {'rtol': 0.5, 'atol': 0.25}},
            'profiles': {'tight': {'tolerance': {'rtol': 0.0}}},
        })
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))

        config = load_config('tight')
        assert config['tolerance'] == {'rtol': 0.0, 'atol': 0.25}
        assert config['display'] == get_default_config()['display']

    def test_unknown_profile(self, tmp_path, monkeypatch):
        """Asking for a profile the file lacks is a ConfigError."""
        write_config(tmp_path, {'defaults': {}, 'profiles': {}})
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            load_config('nope')

    def test_profile_from_environment(self, monkeypatch):
        """RLEVECTOR_PROFILE picks the profile when none is passed."""
        monkeypatch.setenv('RLEVECTOR_PROFILE', 'exact')
        assert load_config()['tolerance'] == {'rtol': 0.0, 'atol': 0.0}

    def test_missing_file_uses_builtin_defaults(self, tmp_path, monkeypatch):
        """Without rlevector.yaml the built-in defaults apply, but profiles cannot."""
        monkeypatch.setattr(loader, 'CONFIG_PATH', tmp_path / 'absent')
        monkeypatch.chdir(tmp_path)
        assert load_config() == get_default_config()
        with pytest.raises(ConfigError):
            load_config('exact')

    def test_non_mapping_file(self, tmp_path, monkeypatch):
        """A YAML list at top level is a ConfigError."""
        (tmp_path / 'rlevector.yaml').write_text("- just\n- a list\n")
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            load_config()


class TestVectorConfig:

    def test_from_dict_round_trip(self):
        """to_dict output loads back to an equal config."""
        vc = VectorConfig.from_dict(get_default_config())
        assert VectorConfig.from_dict(vc.to_dict()) == vc

    def test_malformed_value(self):
        """A non-numeric tolerance is a ConfigError."""
        with pytest.raises(ConfigError):
            VectorConfig.from_dict({'tolerance': {'rtol': 'lots'}})

    def test_tolerance_property(self):
        """The tolerance property builds a Tolerance from the section."""
        vc = VectorConfig(tolerance={'rtol': 0.1, 'atol': 0.2})
        assert vc.tolerance.rtol == 0.1
        assert vc.tolerance.atol == 0.2

    def test_cached(self):
        """get_vector_config is cached until clear_config_cache."""
        assert get_vector_config() is get_vector_config()
        first = get_vector_config()
        clear_config_cache()
        assert get_vector_config() is not first

    def test_vectors_pick_up_profile(self, monkeypatch):
        """New vectors use the tolerance of the active profile."""
        monkeypatch.setenv('RLEVECTOR_PROFILE', 'exact')
        clear_config_cache()
        assert RleVector.from_dense([0.1 + 0.2, 0.3]).n_runs == 2

    def test_loose_profile(self):
        """The loose profile merges values a relative 1e-8 apart."""
        tol = get_vector_config('loose').tolerance
        assert RleVector.from_dense([1.0, 1.0 + 1e-8], tolerance=tol).n_runs == 1


class TestMalformedConfig:

    def test_section_not_a_mapping(self):
        """A scalar where a section mapping belongs is a ConfigError."""
        with pytest.raises(ConfigError):
            VectorConfig.from_dict({'tolerance': 5})

    def test_negative_tolerance(self):
        """Negative tolerances fail validation as ConfigError."""
        with pytest.raises(ConfigError):
            VectorConfig.from_dict({'tolerance': {'rtol': -1}})

    def test_negative_max_runs(self):
        """A negative run limit for repr is rejected."""
        with pytest.raises(ConfigError):
            VectorConfig.from_dict({'display': {'max_runs': -3}})

    def test_unknown_section_key(self):
        """Misspelled keys inside a section are rejected."""
        with pytest.raises(ConfigError):
            VectorConfig.from_dict({'tolerance': {'rtoll': 0.1}})

    def test_scalar_defaults_in_file(self, tmp_path, monkeypatch):
        """A scalar tolerance section in the file is a ConfigError."""
        write_config(tmp_path, {'defaults': {'tolerance': 5}})
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            get_vector_config()

    def test_negative_tolerance_in_file(self, tmp_path, monkeypatch):
        """Bad values in rlevector.yaml surface as ConfigError, not from Tolerance."""
        write_config(tmp_path, {'defaults': {'tolerance': {'rtol': -1}}})
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            get_vector_config()

    def test_defaults_not_a_mapping(self, tmp_path, monkeypatch):
        """A defaults list is a ConfigError."""
        write_config(tmp_path, {'defaults': [1, 2]})
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            load_config()

    def test_profile_not_a_mapping(self, tmp_path, monkeypatch):
        """A profile whose body is not a mapping is a ConfigError."""
        write_config(tmp_path, {'defaults': {}, 'profiles': {'odd': 'exact'}})
        monkeypatch.setenv('RLEVECTOR_CONFIG_DIR', str(tmp_path))
        with pytest.raises(ConfigError):
            load_config('odd')
