"""
Tests for the OLA command line transport (subprocess mocked).
"""

import subprocess
from unittest.mock import patch

import pytest

from hardware.dmx.ola_transport import OlaConfig, OlaTransport, TransportError


def completed(returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr=stderr)


class TestOlaTransport:

    def test_send_invokes_ola_set_dmx(self):
        transport = OlaTransport()
        with patch("hardware.dmx.ola_transport.subprocess.run", return_value=completed()) as run:
            transport.send(3, [1, 2, 255, 0])

        args, kwargs = run.call_args
        assert args[0] == ["ola_set_dmx", "-u", "3", "-d", "1,2,255,0"]
        assert kwargs["timeout"] == 0.5
        assert kwargs["capture_output"] is True

    def test_values_clamped(self):
        transport = OlaTransport()
        with patch("hardware.dmx.ola_transport.subprocess.run", return_value=completed()) as run:
            transport.send(1, [300, -5, 17])
        assert run.call_args[0][0][-1] == "255,0,17"

    def test_frame_truncated_to_universe_size(self):
        transport = OlaTransport(OlaConfig(universe_size=4))
        with patch("hardware.dmx.ola_transport.subprocess.run", return_value=completed()) as run:
            transport.send(1, list(range(10)))
        assert run.call_args[0][0][-1] == "0,1,2,3"

    def test_custom_executable(self):
        transport = OlaTransport(OlaConfig(executable="/opt/ola/bin/ola_set_dmx"))
        with patch("hardware.dmx.ola_transport.subprocess.run", return_value=completed()) as run:
            transport.send(2, [0])
        assert run.call_args[0][0][0] == "/opt/ola/bin/ola_set_dmx"

    def test_nonzero_exit(self):
        transport = OlaTransport()
        with patch("hardware.dmx.ola_transport.subprocess.run", return_value=completed(1, "no olad")):
            with pytest.raises(TransportError, match="no olad"):
                transport.send(1, [0, 0, 0])

    def test_missing_executable(self):
        transport = OlaTransport()
        with patch("hardware.dmx.ola_transport.subprocess.run", side_effect=FileNotFoundError("ola_set_dmx")):
            with pytest.raises(TransportError):
                transport.send(1, [0])

    def test_timeout(self):
        transport = OlaTransport()
        timeout = subprocess.TimeoutExpired(cmd="ola_set_dmx", timeout=0.5)
        with patch("hardware.dmx.ola_transport.subprocess.run", side_effect=timeout):
            with pytest.raises(TransportError):
                transport.send(1, [0])
