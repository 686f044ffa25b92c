"""Tests for session configuration."""

from __future__ import annotations

import pytest

from pythermia.config import SessionConfig
from pythermia.exceptions import ConfigurationError
from pythermia.registers.definitions import HeatpumpModel


class TestHeatpumpModel:
    """Tests for model token parsing."""

    def test_tokens(self) -> None:
        assert HeatpumpModel.from_token("mega") is HeatpumpModel.MEGA
        assert HeatpumpModel.from_token("inverter") is HeatpumpModel.INVERTER

    @pytest.mark.parametrize("token", ["MEGA", "Mega", " mega", "inverter ", "INVERTER"])
    def test_tokens_match_exactly(self, token: str) -> None:
        with pytest.raises(ConfigurationError, match="Unknown model"):
            HeatpumpModel.from_token(token)

    def test_unknown_token(self) -> None:
        with pytest.raises(ConfigurationError, match="must be one of"):
            HeatpumpModel.from_token("diplomat")

    def test_unknown_token_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            HeatpumpModel.from_token("")


class TestSessionConfig:
    """Tests for SessionConfig dataclass."""

    def test_minimal(self) -> None:
        config = SessionConfig(host="192.168.0.106", model=HeatpumpModel.MEGA)

        assert config.port == 502
        assert config.unit_id == 1
        assert config.timeout == 3.0
        config.validate()

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"host": ""}, "host"),
            ({"port": 0}, "port"),
            ({"port": 70000}, "port"),
            ({"unit_id": 0}, "unit_id"),
            ({"unit_id": 248}, "unit_id"),
            ({"timeout": 0}, "timeout"),
            ({"model": "mega"}, "model"),
        ],
    )
    def test_validate_rejects(self, overrides: dict, message: str) -> None:
        values = {"host": "192.168.0.106", "model": HeatpumpModel.MEGA, **overrides}
        config = SessionConfig(**values)

        with pytest.raises(ConfigurationError, match=message):
            config.validate()

    def test_to_dict(self) -> None:
        config = SessionConfig(host="thermia.local", model=HeatpumpModel.INVERTER, timeout=5.0)

        assert config.to_dict() == {
            "host": "thermia.local",
            "model": "inverter",
            "port": 502,
            "unit_id": 1,
            "timeout": 5.0,
        }

    def test_dict_round_trip(self) -> None:
        config = SessionConfig(
            host="thermia.local", model=HeatpumpModel.INVERTER, port=5020, unit_id=3
        )

        assert SessionConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self) -> None:
        config = SessionConfig.from_dict({"host": "192.168.0.106"})

        assert config.model is HeatpumpModel.MEGA
        assert config.port == 502

    def test_from_dict_unknown_model(self) -> None:
        with pytest.raises(ConfigurationError):
            SessionConfig.from_dict({"host": "192.168.0.106", "model": "diplomat"})

    def test_from_env(self) -> None:
        environ = {
            "THERMIA_HOST": "192.168.0.106",
            "THERMIA_MODEL": "inverter",
            "THERMIA_PORT": "5020",
            "THERMIA_TIMEOUT": "1.5",
        }

        config = SessionConfig.from_env(environ=environ)

        assert config.host == "192.168.0.106"
        assert config.model is HeatpumpModel.INVERTER
        assert config.port == 5020
        assert config.unit_id == 1
        assert config.timeout == 1.5

    def test_from_env_custom_prefix(self) -> None:
        config = SessionConfig.from_env(prefix="HP_", environ={"HP_HOST": "heatpump"})

        assert config.host == "heatpump"

    def test_from_env_invalid_number(self) -> None:
        with pytest.raises(ConfigurationError, match="THERMIA_"):
            SessionConfig.from_env(environ={"THERMIA_HOST": "x", "THERMIA_PORT": "abc"})

    def test_from_env_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THERMIA_HOST", "192.168.0.200")
        for name in ("MODEL", "PORT", "UNIT_ID", "TIMEOUT"):
            monkeypatch.delenv(f"THERMIA_{name}", raising=False)

        config = SessionConfig.from_env()

        assert config.host == "192.168.0.200"
        assert config.model is HeatpumpModel.MEGA
