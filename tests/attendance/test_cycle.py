from src.presence_tracker.presence_tracker.attendance.cycle import next_category
from src.presence_tracker.presence_tracker.categories.model import Category

from fakes import default_categories


def _codes_from(start, categories, steps):
    code = start
    seen = []
    for _ in range(steps):
        nxt = next_category(code, categories)
        code = nxt.code if nxt else None
        seen.append(code)
    return seen


def test_cycle_from_empty_goes_os_t_ooo_then_clear():
    assert _codes_from(None, default_categories(), 4) == ["OS", "T", "OOO", None]


def test_empty_string_counts_as_empty():
    assert next_category("", default_categories()).code == "OS"


def test_empty_prefers_on_site_even_when_not_first():
    cats = [
        Category(category_id=5, code="BT", label="Business Trip", color=""),
        Category(category_id=1, code="OS", label="On Site", color=""),
    ]
    assert next_category(None, cats).code == "OS"


def test_empty_without_on_site_picks_first_active():
    cats = [Category(category_id=2, code="T", label="Teleworking", color="")]
    assert next_category(None, cats).code == "T"


def test_no_active_categories_yields_clear():
    assert next_category(None, []) is None
    assert next_category("OS", []) is None


def test_unknown_code_restarts_at_first_active():
    assert next_category("T", [c for c in default_categories() if c.code != "T"]).code == "OS"
    assert next_category("ZZZ", default_categories()).code == "OS"


def test_n_plus_one_steps_close_the_cycle():
    cats = default_categories()
    for start in [None, "OS", "T", "OOO"]:
        assert _codes_from(start, cats, len(cats) + 1)[-1] == start


def test_single_category_toggles():
    cats = [Category(category_id=1, code="OS", label="On Site", color="")]
    assert _codes_from(None, cats, 4) == ["OS", None, "OS", None]
