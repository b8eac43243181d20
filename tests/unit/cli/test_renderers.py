"""
Unit tests for the JSON output envelope.
"""

import json

from pydantic import BaseModel

from farmapp import __version__
from farmapp.cli.renderers import JsonRenderer
from farmapp.core.exceptions import ActionPlanNotFoundError


class Payload(BaseModel):
    count: int


class TestJsonRenderer:

    def test_success_envelope(self, capsys):
        JsonRenderer("sellers").render_success(Payload(count=3))

        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "success"
        assert data["meta"]["command"] == "sellers"
        assert data["meta"]["version"] == __version__
        assert data["data"] == {"count": 3}

    def test_domain_error_envelope(self, capsys):
        JsonRenderer("plans").render_error(ActionPlanNotFoundError("x-1"))

        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "error"
        assert data["error"]["code"] == "ActionPlanNotFoundError"
        assert data["error"]["message"] == "Action plan not found: x-1"

    def test_capture_hides_stray_output(self, capsys):
        renderer = JsonRenderer("graph")
        with renderer.capture() as buffer:
            print("noise")
        renderer.render_success({"ok": True})

        out = capsys.readouterr().out
        assert "noise" not in out
        assert "noise" in buffer.getvalue()
        assert json.loads(out)["data"] == {"ok": True}
