"""Tests for Listo utility modules."""

import logging


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from listo.utils.logger import get_logger

        assert get_logger("mymodule").name == "listo.mymodule"

    def test_keeps_package_names(self) -> None:
        from listo.utils.logger import get_logger

        assert get_logger("listo").name == "listo"
        assert get_logger("listo.transform").name == "listo.transform"

    def test_returns_stdlib_logger(self) -> None:
        from listo.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_no_handlers_installed(self) -> None:
        import listo  # noqa: F401

        assert logging.getLogger("listo").handlers == []
