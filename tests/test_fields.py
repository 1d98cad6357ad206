from plan_mail.plan.fields import (
    _as_text,
    _split_lines,
    day_exercises,
    day_title,
    exercise_fields,
    extract_display_name,
    extract_email,
    extract_plan,
)


def test_extract_plan_accepts_either_key():
    assert extract_plan({"plan": {"summary": "x"}}) == {"summary": "x"}
    assert extract_plan({"plan_data": {"notes": "y"}}) == {"notes": "y"}
    assert extract_plan({"plan": None}) is None
    assert extract_plan({}) is None


def test_empty_plan_object_counts_as_present():
    assert extract_plan({"plan": {}}) == {}


def test_extract_email_strips_and_rejects_blank():
    assert extract_email({"email": "  a@b.com "}) == "a@b.com"
    assert extract_email({"email": ""}) is None
    assert extract_email({}) is None


def test_display_name_lookup_order():
    assert extract_display_name({"answers": {"name": "Ana"}, "user_name": "Bo"}) == "Ana"
    assert extract_display_name({"answers": {}, "user_name": "Bo"}) == "Bo"
    assert extract_display_name({"firstName": "Cy"}) == "Cy"
    assert extract_display_name({"answers": "oops"}) is None
    assert extract_display_name({"user_name": "   "}) is None


def test_as_text_coercion():
    assert _as_text(None) == ""
    assert _as_text(3) == "3"
    assert _as_text(3.0) == "3"
    assert _as_text(2.5) == "2.5"
    assert _as_text(True) == "true"
    assert _as_text("8-12") == "8-12"


def test_split_lines_handles_crlf_and_blank():
    assert _split_lines("a\r\nb") == ["a", "b"]
    assert _split_lines("") == []
    assert _split_lines(None) == []


def test_day_accessors_tolerate_loose_shapes():
    assert day_title({"label": "Rest"}) == "Rest"
    assert day_title("Monday") == "Monday"
    assert day_exercises({"blocks": [{"name": "Row"}]}) == [{"name": "Row"}]
    assert day_exercises({"exercises": "not a list"}) == []
    assert day_exercises(None) == []


def test_exercise_fields_from_plain_string():
    fields = exercise_fields("Jumping jacks")
    assert fields["name"] == "Jumping jacks"
    assert fields["sets"] == ""
