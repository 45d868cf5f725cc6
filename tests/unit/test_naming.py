"""Unit tests for activity/layout naming conventions."""

import pytest

from activity_template.naming import (
    activity_name_from_layout,
    binding_class_name,
    camel_case_to_underscores,
    escape_kotlin_identifier,
    layout_name_from_activity,
    underscores_to_camel_case,
)


class TestCaseConversion:
    """Tests for the case conversion helpers."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Main", "main"),
            ("UserProfile", "user_profile"),
            ("HTTPClient", "http_client"),
            ("Main2Screen", "main2_screen"),
            ("", ""),
        ],
    )
    def test_camel_case_to_underscores(self, text, expected):
        """Test CamelCase to snake_case conversion, including acronym runs."""
        assert camel_case_to_underscores(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("activity_main", "ActivityMain"),
            ("user__profile", "UserProfile"),
            ("_leading", "Leading"),
            ("", ""),
        ],
    )
    def test_underscores_to_camel_case(self, text, expected):
        """Test snake_case to PascalCase conversion drops empty segments."""
        assert underscores_to_camel_case(text) == expected


class TestLayoutNameFromActivity:
    """Tests for suggesting layout names."""

    @pytest.mark.parametrize(
        "activity,expected",
        [
            ("MainActivity", "activity_main"),
            ("UserProfileActivity", "activity_user_profile"),
            ("mainActivity", "activity_main"),
            ("Settings", "activity_settings"),
            ("HTTPClientActivity", "activity_http_client"),
        ],
    )
    def test_suggestions(self, activity, expected):
        """Test the conventional activity_ prefix and snake casing."""
        assert layout_name_from_activity(activity) == expected

    def test_strips_repeated_suffix(self):
        """Test that a doubled Activity suffix is stripped entirely."""
        assert layout_name_from_activity("LoginActivityActivity") == "activity_login"

    def test_degenerate_inputs_do_not_raise(self):
        """Test best-effort output for empty and suffix-only names."""
        assert layout_name_from_activity("") == ""
        assert layout_name_from_activity("Activity") == "activity"


class TestActivityNameFromLayout:
    """Tests for suggesting activity names."""

    @pytest.mark.parametrize(
        "layout,expected",
        [
            ("activity_main", "MainActivity"),
            ("activity_user_profile", "UserProfileActivity"),
            ("settings", "SettingsActivity"),
            ("login_activity", "LoginActivity"),
            ("main_activity_screen", "MainActivityScreenActivity"),
        ],
    )
    def test_suggestions(self, layout, expected):
        """Test prefix/suffix stripping and PascalCase conversion."""
        assert activity_name_from_layout(layout) == expected

    def test_degenerate_inputs_do_not_raise(self):
        """Test best-effort output for empty and prefix-only names."""
        assert activity_name_from_layout("") == ""
        assert activity_name_from_layout("activity") == "Activity"
        assert activity_name_from_layout("activity_") == "Activity"

    @pytest.mark.parametrize(
        "activity",
        ["MainActivity", "UserProfileActivity", "CheckoutSummaryActivity", "Main2Activity"],
    )
    def test_near_inverse(self, activity):
        """Test that activity -> layout -> activity recovers the original name."""
        assert activity_name_from_layout(layout_name_from_activity(activity)) == activity

    def test_near_inverse_normalizes_first_letter(self):
        """Test that the round trip only normalizes the first letter's case."""
        assert activity_name_from_layout(layout_name_from_activity("mainActivity")) == "MainActivity"


class TestBindingAndEscaping:
    """Tests for binding class names and Kotlin identifier escaping."""

    def test_binding_class_name(self):
        """Test the view binding class derived from a layout name."""
        assert binding_class_name("activity_main") == "MainActivityBinding"
        assert binding_class_name("activity_user_profile") == "UserProfileActivityBinding"

    def test_escape_kotlin_keywords(self):
        """Test that only keyword segments are backtick-quoted."""
        assert escape_kotlin_identifier("com.example.app") == "com.example.app"
        assert escape_kotlin_identifier("com.example.in") == "com.example.`in`"
        assert escape_kotlin_identifier("is.fun.val") == "`is`.`fun`.`val`"
