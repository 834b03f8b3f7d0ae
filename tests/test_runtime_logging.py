from __future__ import annotations

import json
import os
import tempfile
import threading
import unittest
from pathlib import Path
from unittest.mock import patch

from fzwalk.runtime_logging import configure_runtime_logging, parse_level


class RuntimeLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_runtime_logging(level="off")

    def test_writes_jsonl_and_filters_by_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "runtime.jsonl"
            logger = configure_runtime_logging(level="info", log_file=path)
            logger.debug("debug.hidden", foo="bar")
            logger.info("info.visible", foo="bar")

            lines = path.read_text(encoding="utf-8").splitlines()
            self.assertGreaterEqual(len(lines), 2)  # includes logging.configured event
            payloads = [json.loads(line) for line in lines]
            self.assertTrue(any(item["event"] == "info.visible" for item in payloads))
            self.assertFalse(any(item["event"] == "debug.hidden" for item in payloads))

    def test_uses_environment_variables(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "from-env.jsonl"
            with patch.dict(
                os.environ,
                {"FZWALK_LOG_LEVEL": "debug", "FZWALK_LOG_FILE": str(path)},
                clear=False,
            ):
                logger = configure_runtime_logging()
                logger.debug("env.debug", alpha=1)

            payloads = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
            self.assertTrue(any(item["event"] == "env.debug" for item in payloads))

    def test_concurrent_writers_keep_lines_whole(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "threads.jsonl"
            logger = configure_runtime_logging(level="warning", log_file=path)

            def emit(worker: int) -> None:
                for index in range(50):
                    logger.warning("walk.unreadable", path=f"/w{worker}/{index}")

            threads = [threading.Thread(target=emit, args=(worker,)) for worker in range(6)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            payloads = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
            self.assertEqual(len(payloads), 300)

    def test_bound_context_is_added_to_every_event(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bound.jsonl"
            logger = configure_runtime_logging(level="info", log_file=path)
            bound = logger.bind(search_id="abc123", query="fo")
            bound.info("search.started", workers=2)
            bound.bind(root="/tmp").warning("walk.unreadable", path="/tmp/x")
            logger.info("unbound.event")

            payloads = {item["event"]: item for item in map(json.loads, path.read_text(encoding="utf-8").splitlines())}
            self.assertEqual(payloads["search.started"]["search_id"], "abc123")
            self.assertEqual(payloads["search.started"]["workers"], 2)
            self.assertEqual(payloads["walk.unreadable"]["query"], "fo")
            self.assertEqual(payloads["walk.unreadable"]["root"], "/tmp")
            self.assertNotIn("search_id", payloads["unbound.event"])

    def test_disabled_logger_bind_stays_disabled(self) -> None:
        logger = configure_runtime_logging(level="off")
        self.assertIs(logger.bind(query="x"), logger)

    def test_parse_level_aliases(self) -> None:
        self.assertEqual(parse_level("WARN"), "warning")
        self.assertEqual(parse_level("none"), "off")
        self.assertEqual(parse_level("bogus", default="info"), "info")


if __name__ == "__main__":
    unittest.main()
