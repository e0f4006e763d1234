import json
from unittest.mock import patch

import pytest
import requests

from huelink.config import load_settings
from huelink.exceptions import PairingError
from huelink.pairing import main, pair_bridge


def test_pair_bridge_returns_username(bridge, respond):
    respond([{"success": {"username": "83b7780291a6ceffbe0bd049104df"}}])

    assert pair_bridge(bridge, "huelink#tests") == "83b7780291a6ceffbe0bd049104df"


def test_link_button_not_pressed(bridge, respond):
    respond([{"error": {"type": 101, "address": "", "description": "link button not pressed"}}])

    with pytest.raises(PairingError, match="link button not pressed"):
        pair_bridge(bridge, "huelink#tests")


def test_unexpected_answer(bridge, respond):
    respond({})

    with pytest.raises(PairingError):
        pair_bridge(bridge, "huelink#tests")


class TestMain:
    @pytest.fixture(autouse=True)
    def env(self, monkeypatch):
        """Environment seen by the script; tests fill it in before calling main()."""
        env = {}
        monkeypatch.setattr("huelink.pairing.load_settings", lambda: load_settings(env))
        return env

    def test_uses_configured_bridge(self, env, respond, sent, capsys):
        env.update({"HUE_BRIDGE_IP": "10.0.0.7", "HUE_DEVICE_TYPE": "lamps#vr"})
        respond([{"success": {"username": "new-key"}}])

        with patch("builtins.input", return_value=""):
            assert main() == 0

        assert sent()[0][:2] == ("POST", "http://10.0.0.7/api")
        assert json.loads(sent()[0][2]) == {"devicetype": "lamps#vr"}
        assert "HUE_USERNAME=new-key" in capsys.readouterr().out

    def test_discovers_bridge(self, respond, sent):
        respond([{"id": "x", "internalipaddress": "192.168.2.23"}])

        with patch("builtins.input", return_value=""), patch("huelink.pairing.pair_bridge", return_value="k") as pair:
            assert main() == 0

        assert sent()[0][1] == "https://discovery.meethue.com/"
        assert pair.call_args.args[0].address == "192.168.2.23"

    def test_no_bridge_found(self, respond):
        respond([])

        assert main() == 1

    def test_pairing_failure(self, env, respond, capsys):
        env["HUE_BRIDGE_IP"] = "10.0.0.7"
        respond([{"error": {"type": 101, "address": "", "description": "link button not pressed"}}])

        with patch("builtins.input", return_value=""):
            assert main() == 1

        assert "link button not pressed" in capsys.readouterr().out

    def test_discovery_failure(self, mock_session, capsys):
        mock_session.request.side_effect = requests.ConnectionError("no internet")

        assert main() == 1

        out = capsys.readouterr().out
        assert "Error finding bridges" in out
        assert "HUE_BRIDGE_IP" in out
