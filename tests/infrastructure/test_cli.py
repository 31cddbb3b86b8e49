"""End-to-end tests for the storefront CLI."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.cli.runtime import truncate


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()

    def _invoke(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _invoke


class TestCatalogCommands:

    def test_categories(self, invoke):
        result = invoke("catalog", "categories")
        assert result.exit_code == 0
        assert result.output.split() == ["Electronics", "Clothing", "Books", "Home"]

    def test_featured(self, invoke):
        result = invoke("catalog", "featured")
        assert result.exit_code == 0
        assert "Modern JavaScript Deep Dive" in result.output

    def test_search_no_match(self, invoke):
        result = invoke("catalog", "search", "zzz")
        assert "No products found." in result.output


class TestCartCommands:

    def test_quote_merges_lines(self, invoke):
        result = invoke("cart", "quote", "--items", "12:1,12:2,3:1")
        assert result.exit_code == 0
        assert "$124.96" in result.output

    def test_unknown_product(self, invoke):
        result = invoke("cart", "quote", "--items", "77:1")
        assert result.exit_code != 0
        assert "Product #77 not found" in result.output


class TestOrderCommands:

    def test_stats(self, invoke):
        result = invoke("orders", "stats")
        assert result.exit_code == 0
        assert "Orders:   5" in result.output
        assert "Revenue:  $724.28" in result.output

    def test_list_filtered(self, invoke):
        result = invoke("orders", "list", "--status", "shipped")
        assert "ORD-10002" in result.output
        assert "ORD-10001" not in result.output

    def test_update_status_then_reload(self, invoke):
        result = invoke("orders", "update-status", "--id", "4", "--status", "processing")
        assert result.exit_code == 0
        assert "ORD-10004 is now processing." in result.output
        assert "Pending:  0" in invoke("orders", "stats").output

    def test_invalid_transition_rejected(self, invoke):
        result = invoke("orders", "update-status", "--id", "5", "--status", "pending")
        assert result.exit_code != 0
        assert "Failed to update order status." in result.output

    def test_next_statuses(self, invoke):
        result = invoke("orders", "next", "--id", "4")
        assert result.exit_code == 0
        assert "ORD-10004 (pending) -> processing, cancelled" in result.output

    def test_next_for_terminal_status(self, invoke):
        result = invoke("orders", "next", "--id", "1")
        assert result.exit_code == 0
        assert "ORD-10001 (delivered) -> none" in result.output

    def test_show_reports_load_failure(self, invoke, tmp_path):
        (tmp_path / "orders.json").write_text("{broken", encoding="utf-8")
        result = invoke("orders", "show", "--id", "1")
        assert result.exit_code != 0
        assert "Failed to load orders." in result.output
        assert "not found" not in result.output


class TestUserCommands:

    def test_show_never_prints_card(self, invoke):
        invoke("profile", "show", "--user-id", "999")
        result = invoke("users", "show", "--id", "999")
        assert result.exit_code == 0
        assert "100 Commerce Blvd" in result.output
        assert "4111" not in result.output

    def test_cannot_toggle_self(self, invoke):
        result = invoke("users", "toggle", "--id", "999", "--as-user", "999")
        assert result.exit_code != 0
        assert "your own account" in result.output

    def test_toggle_other(self, invoke):
        result = invoke("users", "toggle", "--id", "100", "--as-user", "999")
        assert "User #100 is now suspended." in result.output
        assert "Active:  4" in invoke("users", "stats").output


class TestProfileCommands:

    def test_shopper_has_no_profile(self, invoke):
        assert "No saved profile." in invoke("profile", "show", "--user-id", "100").output

    def test_admin_gets_default(self, invoke):
        result = invoke("profile", "show", "--user-id", "999")
        assert "San Francisco" in result.output
        assert "**** 1111" in result.output

    def test_reports_load_failure(self, invoke, tmp_path):
        (tmp_path / "users.json").write_text("[]\n[", encoding="utf-8")
        result = invoke("profile", "show", "--user-id", "999")
        assert result.exit_code != 0
        assert "Failed to load users." in result.output


class TestTruncate:

    def test_short_text_unchanged(self):
        assert truncate("Lamp", 10) == "Lamp"

    def test_long_text_cut_with_trail(self):
        assert truncate("abcdefghij", 4) == "abcd..."

    def test_empty_text(self):
        assert truncate("", 4) == ""
