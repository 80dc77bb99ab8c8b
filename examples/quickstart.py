"""Quickstart example for dateranger.

This example demonstrates compact range formatting for a few locales and
styles, a time range, a timezone-aware range, and a custom separator
provider.

Note: Outputs below assume a recent Babel release. Older CLDR data uses a
regular space before AM/PM where newer data uses a narrow no-break space.
"""

from datetime import UTC, datetime

from dateranger import DateStyle, FieldCategory, RangeConfig, RangeFormatter, format_range

# Example 1: Date ranges
print("=" * 50)
print("Example 1: Date Ranges")
print("=" * 50)

print(format_range("2020-01-03", "2020-01-05"))
# Output: Jan 3–5, 2020

print(format_range("2020-01-03", "2020-02-05"))
# Output: Jan 3 – Feb 5, 2020

print(format_range("2019-12-30", "2020-01-02"))
# Output: Dec 30, 2019 – Jan 2, 2020

print(format_range("2020-01-03", "2020-01-03"))
# Output: Jan 3, 2020

# Example 2: Locales and styles
print("\n" + "=" * 50)
print("Example 2: Locales and Styles")
print("=" * 50)

print(format_range("2020-01-03", "2020-01-05", locale="de"))
# Output: 03.–05.01.2020

print(format_range("2020-01-03", "2020-01-05", locale="de", date_style="long"))
# Output: 3.–5. Januar 2020

print(format_range("2020-01-03", "2020-01-05", locale="fr"))
# Output: 3–5 janv. 2020

print(format_range("2020-01-03", "2020-01-05", locale="ja"))
# Output: 2020/01/03–05

# Example 3: Time ranges
print("\n" + "=" * 50)
print("Example 3: Time Ranges")
print("=" * 50)

formatter = RangeFormatter()
config = RangeConfig(time_style=DateStyle.SHORT)

print(formatter.format_range("2020-01-03T10:00", "2020-01-03T11:30", config))
# Output: Jan 3, 2020, 10:00 – 11:30 AM

print(formatter.format_range("2020-01-03T10:00", "2020-01-03T14:00", config))
# Output: Jan 3, 2020, 10:00 AM – 2:00 PM

print(formatter.format_range("2020-01-03T10:00", "2020-01-05T11:00", config))
# Output: Jan 3, 2020, 10:00 AM – Jan 5, 2020, 11:00 AM

# Example 4: Timezones
print("\n" + "=" * 50)
print("Example 4: Timezones")
print("=" * 50)

new_york = RangeConfig(time_style=DateStyle.SHORT, timezone="America/New_York")

# Same calendar day, but the clocks moved forward in between
print(
    formatter.format_range(
        datetime(2020, 3, 8, 6, 30, tzinfo=UTC),
        datetime(2020, 3, 8, 7, 30, tzinfo=UTC),
        new_york,
    )
)
# Output: Mar 8, 2020, 1:30 AM – Mar 8, 2020, 3:30 AM

print(formatter.format_range("2020-03-01", "2020-03-20", RangeConfig(timezone="America/New_York")))
# Output: Mar 1–20, 2020

# Example 5: Custom separator provider
print("\n" + "=" * 50)
print("Example 5: Custom Separator Provider")
print("=" * 50)


class WordProvider:
    """Spell out the range for every split."""

    def modify_separator(self, split: FieldCategory, separator: str, date_style: DateStyle) -> str:
        return " to "


custom = RangeFormatter()
custom.separators.register("en", WordProvider())
print(custom.format_range("2020-01-03", "2020-01-05"))
# Output: Jan 3 to 5, 2020

print("\n" + "=" * 50)
print("Pattern mask cache:", custom.cache_info()["size"], "entries")
print("=" * 50)
