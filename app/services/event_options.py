from enum import Enum


class EventDay(str, Enum):
    mon = "mon"
    tue = "tue"
    wed = "wed"


class EventTime(str, Enum):
    t1800 = "18:00"
    t1830 = "18:30"
    t1900 = "19:00"
    t1930 = "19:30"
    t2000 = "20:00"
    t2030 = "20:30"
    t2100 = "21:00"
    t2130 = "21:30"
    t2200 = "22:00"


class Gender(str, Enum):
    male = "male"
    female = "female"


def opposite_gender(gender: Gender) -> Gender:
    return Gender.female if gender == Gender.male else Gender.male


def all_time_slots():
    return [(day, time) for day in EventDay for time in EventTime]
