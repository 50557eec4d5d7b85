import json
import pytest
from edgecon.core.config import ReductionConfig, ROOT_COMPONENT
from edgecon.core.errors import ConfigError

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("EDGECON_SOLVER", raising=False)
    monkeypatch.delenv("EDGECON_CONFIG_PATH", raising=False)

def test_defaults():
    config = ReductionConfig.from_env_or_file()
    assert config.solver_name == "cadical153"
    assert config.root_component == ROOT_COMPONENT == 0

def test_solver_from_env(monkeypatch):
    monkeypatch.setenv("EDGECON_SOLVER", "glucose4")
    assert ReductionConfig.from_env_or_file().solver_name == "glucose4"

def test_config_file(monkeypatch, tmp_path):
    path = tmp_path / "edgecon.json"
    path.write_text(json.dumps({"solver_name": "m22", "root_component": 1}))
    monkeypatch.setenv("EDGECON_CONFIG_PATH", str(path))

    config = ReductionConfig.from_env_or_file()
    assert config.solver_name == "m22"
    assert config.root_component == 1

def test_invalid_config_file(monkeypatch, tmp_path):
    path = tmp_path / "edgecon.json"
    path.write_text("{not json")
    monkeypatch.setenv("EDGECON_CONFIG_PATH", str(path))
    with pytest.raises(ConfigError):
        ReductionConfig.from_env_or_file()

def test_negative_root_rejected(monkeypatch, tmp_path):
    path = tmp_path / "edgecon.json"
    path.write_text(json.dumps({"root_component": -1}))
    monkeypatch.setenv("EDGECON_CONFIG_PATH", str(path))
    with pytest.raises(ConfigError):
        ReductionConfig.from_env_or_file()

def test_env_solver_overrides_file(monkeypatch, tmp_path):
    path = tmp_path / "edgecon.json"
    path.write_text(json.dumps({"solver_name": "m22", "root_component": 2}))
    monkeypatch.setenv("EDGECON_CONFIG_PATH", str(path))
    monkeypatch.setenv("EDGECON_SOLVER", "glucose4")

    config = ReductionConfig.from_env_or_file()
    assert config.solver_name == "glucose4"
    assert config.root_component == 2

def test_non_object_config_file(monkeypatch, tmp_path):
    path = tmp_path / "edgecon.json"
    path.write_text(json.dumps([1, 2]))
    monkeypatch.setenv("EDGECON_CONFIG_PATH", str(path))
    with pytest.raises(ConfigError):
        ReductionConfig.from_env_or_file()
