"""Plan domain entities: days of the week, plan slots and the weekly plan built from them."""
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from mealplanner.domain.Errors import ValidationError
from mealplanner.domain.Meal import MealCategory, category_label


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def parse(cls, value: Union[str, "DayOfWeek"]) -> "DayOfWeek":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).capitalize())
        except ValueError:
            raise ValidationError(
                f"Wrong day of week! Choose from: {', '.join(d.value for d in cls)}."
            ) from None


def day_label(day: DayOfWeek) -> str:
    return day.value


DAY_ORDER: Dict[DayOfWeek, int] = {day: i for i, day in enumerate(DayOfWeek)}
CATEGORY_ORDER: Dict[MealCategory, int] = {category: i for i, category in enumerate(MealCategory)}


class PlanSlot:
    '''One (day, category) assignment. meal_name is filled when read back from storage.'''

    def __init__(self, day: DayOfWeek, category: MealCategory, meal_id: int, meal_name: str = ""):
        self.day = DayOfWeek.parse(day)
        self.category = MealCategory.parse(category)
        self.meal_id = meal_id
        self.meal_name = meal_name

    @property
    def key(self) -> Tuple[DayOfWeek, MealCategory]:
        return self.day, self.category

    def get_category(self) -> str:
        return category_label(self.category)

    def __str__(self) -> str:
        return f"{self.get_category()}: {self.meal_name}"

    def __repr__(self) -> str:
        return f"PlanSlot({self.day.value}, {self.category.value}, meal_id={self.meal_id})"

    def to_dict(self) -> Dict:
        return {
            "day": self.day.value,
            "category": self.category.value,
            "meal_id": self.meal_id,
            "meal": self.meal_name,
        }


class WeeklyPlan:
    """All current slots, kept in canonical order (Monday..Sunday, breakfast..dinner).

    Slots are keyed by (day, category); adding a slot for a key that is already
    present replaces it, so a plan never holds two slots for the same pair.
    """

    def __init__(self, slots: Optional[List[PlanSlot]] = None):
        self._slots: Dict[Tuple[DayOfWeek, MealCategory], PlanSlot] = {}
        for slot in slots or []:
            self.add_slot(slot)

    def add_slot(self, slot: PlanSlot):
        self._slots[slot.key] = slot

    def get(self, day: DayOfWeek, category: MealCategory) -> Optional[PlanSlot]:
        return self._slots.get((DayOfWeek.parse(day), MealCategory.parse(category)))

    @property
    def slots(self) -> List[PlanSlot]:
        return sorted(self._slots.values(),
                      key=lambda s: (DAY_ORDER[s.day], CATEGORY_ORDER[s.category]))

    def by_day(self) -> Dict[DayOfWeek, List[PlanSlot]]:
        '''Groups slots per day; only days with at least one slot appear.'''
        grouped: Dict[DayOfWeek, List[PlanSlot]] = {}
        for slot in self.slots:
            grouped.setdefault(slot.day, []).append(slot)
        return grouped

    def is_empty(self) -> bool:
        return not self._slots

    def __iter__(self) -> Iterator[PlanSlot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self._slots)

    def to_dict(self) -> Dict[str, Dict[str, Dict]]:
        return {
            day.value: {slot.category.value: {"meal_id": slot.meal_id, "meal": slot.meal_name}
                        for slot in slots}
            for day, slots in self.by_day().items()
        }
