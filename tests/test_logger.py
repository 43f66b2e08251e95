import io
import logging
import unittest

from assignmate.utils.logger import HTTP_LOGGERS, configure_logging, get_logger


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.saved_handlers = list(root.handlers)
        self.saved_level = root.level
        self.saved_http = {name: logging.getLogger(name).level for name in HTTP_LOGGERS}

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self.saved_handlers
        root.setLevel(self.saved_level)
        for name, level in self.saved_http.items():
            logging.getLogger(name).setLevel(level)

    def test_records_use_the_pipe_format_on_the_given_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("assignmate.engine.generator").warning("Could not place 'FOX'")
        get_logger("assignmate.engine.generator").debug("hidden")
        output = stream.getvalue()
        self.assertIn("| WARNING | assignmate.engine.generator | Could not place 'FOX'", output)
        self.assertNotIn("hidden", output)

    def test_default_logger_is_the_package_logger(self) -> None:
        self.assertEqual(get_logger().name, "assignmate")

    def test_http_loggers_stay_quiet_unless_debugging(self) -> None:
        configure_logging(logging.INFO, stream=io.StringIO())
        for name in HTTP_LOGGERS:
            self.assertEqual(logging.getLogger(name).level, logging.WARNING)
        configure_logging(logging.DEBUG, stream=io.StringIO())
        for name in HTTP_LOGGERS:
            self.assertEqual(logging.getLogger(name).level, logging.DEBUG)
        configure_logging(logging.ERROR, stream=io.StringIO())
        for name in HTTP_LOGGERS:
            self.assertEqual(logging.getLogger(name).level, logging.ERROR)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
