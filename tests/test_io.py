import json
import unittest
from datetime import date
from unittest.mock import MagicMock

import requests

from nytgames.config import FetchConfig, ReportConfig
from nytgames.core.constants import Difficulty
from nytgames.core.exceptions import CardinalityError, FetchError
from nytgames.core.models import PublicationInformation, SudokuCollection, WordleGame
from nytgames.io.export import dump_record
from nytgames.io.http_client import PuzzleHttpClient, strip_non_ascii
from nytgames.io.scripts import extract_script_payload


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


class HttpClientTests(unittest.TestCase):
    def test_json_bodies_lose_non_ascii_characters(self) -> None:
        session = MagicMock()
        session.get.return_value = make_response('{"editor": "José — Ruiz"}')
        client = PuzzleHttpClient(session=session)
        self.assertEqual(client.get_text("https://example.test/a.json"), '{"editor": "Jos  Ruiz"}')

    def test_html_bodies_can_keep_everything(self) -> None:
        session = MagicMock()
        session.get.return_value = make_response("café")
        client = PuzzleHttpClient(session=session)
        self.assertEqual(client.get_text("https://example.test/page", ascii_only=False), "café")

    def test_headers_and_timeout_are_forwarded(self) -> None:
        session = MagicMock()
        session.get.return_value = make_response("{}")
        client = PuzzleHttpClient(FetchConfig(timeout_seconds=12.5), session=session)
        client.get_text("https://example.test/daily.json", {"x-games-auth-bypass": "true"})
        session.get.assert_called_once_with(
            "https://example.test/daily.json",
            headers={"x-games-auth-bypass": "true"},
            timeout=12.5,
        )

    def test_non_success_status_raises_fetch_error(self) -> None:
        session = MagicMock()
        session.get.return_value = make_response(status_code=404)
        client = PuzzleHttpClient(session=session)
        with self.assertRaises(FetchError) as ctx:
            client.get_text("https://example.test/missing.json")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertIn("missing.json", str(ctx.exception))

    def test_transport_failure_raises_fetch_error(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("connection refused")
        client = PuzzleHttpClient(session=session)
        with self.assertRaises(FetchError) as ctx:
            client.get_text("https://example.test/a.json")
        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("connection refused", str(ctx.exception))

    def test_strip_non_ascii(self) -> None:
        self.assertEqual(strip_non_ascii("\ufeff{\"a\": 1}\u00a0"), '{"a": 1}')


def page(*scripts: str) -> str:
    tags = "".join(f'<script type="text/javascript">{body}</script>' for body in scripts)
    return f"<html><head>{tags}<script>window.gameData = {{}}</script></head><body></body></html>"


class ScriptExtractionTests(unittest.TestCase):
    def test_single_match_returns_text_after_prefix(self) -> None:
        html = page("window.dataLayer = [];", 'window.gameData = {"id": 3}')
        self.assertEqual(extract_script_payload(html), '{"id": 3}')

    def test_trailing_semicolon_is_dropped(self) -> None:
        html = page('window.gameData = {"id": 3};\n')
        self.assertEqual(json.loads(extract_script_payload(html)), {"id": 3})

    def test_zero_or_many_matches_fail_with_count(self) -> None:
        cases = {
            0: page("window.dataLayer = [];"),
            2: page("window.gameData = {}", "window.gameData = {}"),
        }
        for count, html in cases.items():
            with self.subTest(count=count):
                with self.assertRaises(CardinalityError) as ctx:
                    extract_script_payload(html)
                self.assertEqual(ctx.exception.actual, count)
                self.assertIn(f"got {count} entries", str(ctx.exception))

    def test_prefix_must_start_the_script(self) -> None:
        html = page('var x = 1; window.gameData = {"id": 3}')
        with self.assertRaises(CardinalityError):
            extract_script_payload(html)


class ConfigTests(unittest.TestCase):
    def test_fetch_config_from_env(self) -> None:
        config = FetchConfig.from_env(
            {"NYTGAMES_HOST": "http://localhost:8080/", "NYTGAMES_TIMEOUT": "3"}
        )
        self.assertEqual(config.host, "http://localhost:8080")
        self.assertEqual(config.timeout_seconds, 3.0)
        self.assertIsNone(config.user_agent)

    def test_defaults_have_no_timeout(self) -> None:
        config = FetchConfig.from_env({})
        self.assertEqual(config.host, "https://www.nytimes.com")
        self.assertIsNone(config.timeout_seconds)
        self.assertEqual(str(ReportConfig.from_env({}).output_dir), "Reports")


class ExportTests(unittest.TestCase):
    def test_dump_record_serializes_dates_and_enums(self) -> None:
        game = WordleGame(
            info=PublicationInformation(id=1, print_date=date(2026, 10, 18), editor=None),
            solution="CRANE",
        )
        data = json.loads(dump_record(game))
        self.assertEqual(data["info"]["print_date"], "2026-10-18")
        self.assertEqual(data["info"]["constructors"], [])
        self.assertEqual(data["solution"], "CRANE")

        collection = SudokuCollection(games={Difficulty.EASY: None})
        self.assertEqual(json.loads(dump_record(collection))["games"], {"easy": None})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
