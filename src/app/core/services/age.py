"""Calendar age calculation shared by validation and response mapping."""
from datetime import date, datetime


def _add_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year + years, day=28)


def calculate_age(date_of_birth: date, now: datetime) -> int:
    """
    Age in whole years as of `now`.

    Starts from the difference in years and subtracts one when this year's
    birthday has not happened yet.
    """
    age = now.year - date_of_birth.year
    if now.date() < _add_years(date_of_birth, age):
        age -= 1
    return age
