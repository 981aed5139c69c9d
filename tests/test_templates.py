from stock_quote_api.notifications import TemplateRenderer

STOCK = {
    "symbol": "AAPL.US",
    "name": "APPLE",
    "date": "2024-05-10",
    "open": 184.9,
    "high": 185.09,
    "low": 182.13,
    "close": 183.05,
}


def test_renders_quote_fields():
    html = TemplateRenderer().render("stock_quote", {"stock": STOCK})

    assert "<strong>Symbol:</strong> AAPL.US" in html
    assert "<strong>Name:</strong> APPLE" in html
    assert "<strong>Close:</strong> 183.05" in html


def test_missing_and_none_values_render_placeholder():
    html = TemplateRenderer().render("stock_quote", {"stock": {**STOCK, "name": None, "date": None}})

    assert "<strong>Name:</strong> N/A" in html
    assert "<strong>Date:</strong> N/A" in html


def test_missing_stock_renders_placeholders():
    html = TemplateRenderer().render("stock_quote")

    assert "<strong>Symbol:</strong> N/A" in html


def test_values_are_escaped():
    html = TemplateRenderer().render("stock_quote", {"stock": {**STOCK, "name": "<b>X</b>"}})

    assert "&lt;b&gt;X&lt;/b&gt;" in html


def test_custom_templates_dir(tmp_path):
    (tmp_path / "hello.html").write_text("Hello {{ who }}")

    assert TemplateRenderer(tmp_path).render("hello", {"who": "there"}) == "Hello there"
