"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from linkit.infrastructure.cli.main import cli
from linkit.infrastructure.settings import get_settings

ORDER_PAYLOAD = {
    "product": "1",
    "personalInfo": {
        "firstName": "Lina",
        "lastName": "Haddad",
        "position": "Marketing Lead",
        "organization": "Petra Labs",
        "phoneNumbers": ["+962 79 123 4567"],
        "email": "lina@petralabs.jo",
    },
    "cardDesign": {"nameOnCard": "Lina Haddad", "color": "#000000", "colorName": "Black"},
    "deliveryInfo": {"country": "1", "city": "1", "addressLine1": "12 Rainbow St"},
    "addons": [{"addon": "1"}],
    "paymentMethod": "cash",
}

CUSTOM_ORDER_PAYLOAD = {
    "companyInfo": {
        "companyName": "Petra Labs",
        "contactPerson": "Omar Said",
        "email": "omar@petralabs.jo",
        "phone": "+962 6 555 0101",
    },
    "orderDetails": {"employeeCount": 20, "message": "Matte finish please"},
}


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("LINKIT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LINKIT_LOG_LEVEL", "CRITICAL")
    get_settings.cache_clear()
    runner = CliRunner()

    def _run(*args, actor="user-1", role="user", input=None):
        return runner.invoke(
            cli, ["--actor", actor, "--role", role, *args], input=input
        )

    yield _run
    get_settings.cache_clear()


@pytest.fixture
def payload_file(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def catalog(run):
    """Seed one country, city, product and addon as an admin."""
    admin = dict(actor="admin-1", role="admin")
    for args in (
        ("country", "add", "--name", "Jordan", "--code", "JO"),
        ("city", "add", "--name", "Amman", "--country", "1", "--fee", "4.00"),
        ("product", "add", "--title", "Classic NFC Card", "--price", "100.00"),
        ("addon", "add", "--title", "Gift box", "--price", "10.00"),
    ):
        result = run(*args, **admin)
        assert result.exit_code == 0, result.output
    return admin


class TestOrderCommands:

    def test_create_order_as_json(self, run, catalog, payload_file):
        result = run("order", "create", "--payload", payload_file("o.json", ORDER_PAYLOAD), "--json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["id"] == 1
        assert data["total"] == 114
        assert data["finalTotal"] == 114
        assert data["message"] == "Order created successfully"

    def test_create_order_text(self, run, catalog, payload_file):
        result = run("order", "create", "--payload", payload_file("o.json", ORDER_PAYLOAD))
        assert result.exit_code == 0, result.output
        assert "Order #1" in result.output
        assert "114.00 JOD" in result.output

    def test_unknown_city_reported(self, run, catalog, payload_file):
        payload = dict(ORDER_PAYLOAD, deliveryInfo=dict(ORDER_PAYLOAD["deliveryInfo"], city="9"))
        result = run("order", "create", "--payload", payload_file("o.json", payload))
        assert result.exit_code == 1
        assert "City not found" in result.output

    def test_invalid_payload(self, run, payload_file, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        result = run("order", "create", "--payload", str(path))
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_status_change_and_visibility(self, run, catalog, payload_file):
        run("order", "create", "--payload", payload_file("o.json", ORDER_PAYLOAD))

        denied = run("order", "status", "--id", "1", "--to", "shipped")
        assert denied.exit_code == 1
        assert "restricted to administrators" in denied.output

        moved = run("order", "status", "--id", "1", "--to", "shipped", **catalog)
        assert moved.exit_code == 0, moved.output
        assert "Order #1 is now shipped." in moved.output

        stranger = run("order", "show", "--id", "1", actor="user-2")
        assert stranger.exit_code == 1
        assert "You can only view your own orders" in stranger.output

    def test_list_for_owner(self, run, catalog, payload_file):
        run("order", "create", "--payload", payload_file("o.json", ORDER_PAYLOAD))
        mine = run("order", "list", "--json")
        theirs = run("order", "list", actor="user-2")
        assert len(json.loads(mine.output)) == 1
        assert "No orders found." in theirs.output

    def test_delete_restore_purge(self, run, catalog, payload_file):
        run("order", "create", "--payload", payload_file("o.json", ORDER_PAYLOAD))

        refused = run("order", "purge", "--id", "1", "--yes", **catalog)
        assert refused.exit_code == 1
        assert "must be deleted before it can be purged" in refused.output

        assert run("order", "delete", "--id", "1", **catalog).exit_code == 0
        assert run("order", "show", "--id", "1").exit_code == 1
        assert run("order", "restore", "--id", "1", **catalog).exit_code == 0
        assert run("order", "show", "--id", "1").exit_code == 0

        run("order", "delete", "--id", "1", **catalog)
        purged = run("order", "purge", "--id", "1", "--yes", **catalog)
        assert purged.exit_code == 0, purged.output
        assert "Order #1 purged." in purged.output


class TestCustomOrderCommands:

    def test_quote_and_approve(self, run, payload_file):
        admin = dict(actor="admin-1", role="admin")
        created = run(
            "custom-order", "create", "--payload", payload_file("c.json", CUSTOM_ORDER_PAYLOAD)
        )
        assert created.exit_code == 0, created.output
        assert "Quote pending" in created.output

        priced = run("custom-order", "price", "--id", "1", "--per-card", "12", **admin)
        assert priced.exit_code == 0, priced.output
        assert "240.00 JOD" in priced.output

        answered = run("custom-order", "respond", "--id", "1", "--approve")
        assert answered.exit_code == 0, answered.output
        assert "Quote approved successfully" in answered.output

        shown = run("custom-order", "show", "--id", "1", "--json")
        data = json.loads(shown.output)
        assert data["status"] == "approved"
        assert data["customPricing"]["totalPrice"] == 240

    def test_respond_needs_a_choice(self, run, payload_file):
        run("custom-order", "create", "--payload", payload_file("c.json", CUSTOM_ORDER_PAYLOAD))
        result = run("custom-order", "respond", "--id", "1")
        assert result.exit_code == 2
        assert "--approve or --reject" in result.output

    def test_illegal_transition(self, run, payload_file):
        run("custom-order", "create", "--payload", payload_file("c.json", CUSTOM_ORDER_PAYLOAD))
        result = run(
            "custom-order", "status", "--id", "1", "--to", "completed",
            actor="admin-1", role="admin",
        )
        assert result.exit_code == 1
        assert "Allowed transitions: reviewing, cancelled" in result.output


class TestPricingCommands:

    def test_standard_tier(self, run):
        result = run("pricing", "tier", "--quantity", "60")
        assert result.exit_code == 0, result.output
        assert "Price per card: 15.00 JOD" in result.output
        assert "Total for 60: 900.00 JOD" in result.output

    def test_quantity_out_of_range(self, run):
        result = run("pricing", "tier", "--quantity", "5")
        assert result.exit_code == 1
        assert "Quantity must be between 10 and 10000" in result.output

    def test_configured_standard_price(self, run, monkeypatch):
        monkeypatch.setenv("LINKIT_STANDARD_PRICE_PER_CARD", "18")
        get_settings.cache_clear()
        result = run("pricing", "tier", "--quantity", "50")
        assert "Price per card: 18.00 JOD" in result.output


class TestCatalogCommands:

    def test_customer_cannot_add_product(self, run):
        result = run("product", "add", "--title", "Metal Card", "--price", "45")
        assert result.exit_code == 1
        assert "restricted to administrators" in result.output

    def test_product_list(self, run, catalog):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Classic NFC Card" in result.output

    def test_product_lifecycle(self, run, catalog):
        assert run("product", "delete", "--id", "1", **catalog).exit_code == 0
        assert "No products found." in run("product", "list").output
        assert "Classic NFC Card" in run("product", "list", "--all").output

    def test_package_add_and_lookup(self, run, catalog):
        added = run(
            "package", "add", "--name", "Standard", "--min", "50", "--max", "99",
            "--price", "15", "--type", "standard", "--fixed", **catalog,
        )
        assert added.exit_code == 0, added.output
        result = run("pricing", "package", "--quantity", "60")
        assert "Total for 60: 900.00 JOD" in result.output
