from enum import Enum


class EventSlot(str, Enum):
    ONE = "eventOne"
    TWO = "eventTwo"
    THREE = "eventThree"
    FOUR = "eventFour"
    FIVE = "eventFive"
