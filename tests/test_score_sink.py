from unittest.mock import patch

import pytest
import requests

from core.errors import SinkRejected
from pipelines.loaders.score_sink import ScoreSinkLoader
from schemas.name_score import ScoreSubmission


class TestScoreSubmission:
    def test_payload_uses_wire_field_name(self):
        assert ScoreSubmission(total_score=236).to_payload() == {"ResultadoObtenido": 236}

    def test_accepts_wire_field_name(self):
        assert ScoreSubmission(ResultadoObtenido=7).total_score == 7


class TestScoreSinkLoader:
    """Tests for submitting the total score."""

    def test_load_posts_score(self, settings, make_response):
        loader = ScoreSinkLoader(settings)

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(200, text="  {\"ok\": true}  \n  done ")
            receipt = loader.load(236)

        assert receipt.status_code == 200
        assert receipt.body == "{\"ok\": true}done"

        args, kwargs = mock_request.call_args
        assert args == ("POST", settings.target_url)
        assert kwargs["json"] == {"ResultadoObtenido": 236}
        assert kwargs["params"] == {
            "archivo": "first_names",
            "extension": "txt",
            "nombre": "Ada Lovelace",
            "prueba": 0,
        }
        assert kwargs["headers"] == {
            "Authorization": "Bearer target-token",
            "Content-Type": "application/json; utf-8",
        }

    def test_zero_score_is_submitted(self, settings, make_response):
        loader = ScoreSinkLoader(settings)

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(200, text="")
            loader.load(0)

        assert mock_request.call_args.kwargs["json"] == {"ResultadoObtenido": 0}

    def test_test_mode_from_settings(self, settings, make_response):
        loader = ScoreSinkLoader(settings.model_copy(update={"test_mode": True}))

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(200, text="")
            loader.load(1)

        assert mock_request.call_args.kwargs["params"]["prueba"] == 1

    def test_overrides_win_over_settings(self, settings, make_response):
        loader = ScoreSinkLoader(settings)

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(200, text="")
            loader.load(1, subject_name="Grace Hopper", test_mode=True)

        params = mock_request.call_args.kwargs["params"]
        assert params["nombre"] == "Grace Hopper"
        assert params["prueba"] == 1

    def test_false_override_beats_test_mode_setting(self, settings, make_response):
        loader = ScoreSinkLoader(settings.model_copy(update={"test_mode": True}))

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(200, text="")
            loader.load(1, test_mode=False)

        assert mock_request.call_args.kwargs["params"]["prueba"] == 0

    def test_rejected_status_keeps_score(self, settings, make_response):
        loader = ScoreSinkLoader(settings)

        with patch("core.http.requests.request") as mock_request:
            mock_request.return_value = make_response(500, text="internal error")
            with pytest.raises(SinkRejected) as exc_info:
                loader.load(236)

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "internal error"
        assert exc_info.value.score == 236
        assert exc_info.value.phase == "sink"

    def test_transport_failure_keeps_score(self, settings):
        loader = ScoreSinkLoader(settings)

        with patch("core.http.requests.request") as mock_request:
            mock_request.side_effect = requests.exceptions.Timeout()
            with pytest.raises(SinkRejected) as exc_info:
                loader.load(99)

        assert exc_info.value.status_code is None
        assert exc_info.value.score == 99

    def test_missing_target_url(self, settings):
        loader = ScoreSinkLoader(settings.model_copy(update={"target_url": ""}))

        with pytest.raises(SinkRejected, match="TARGET_URL") as exc_info:
            loader.load(5)

        assert exc_info.value.score == 5
