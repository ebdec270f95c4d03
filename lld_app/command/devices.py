"""Receivers: the devices commands act on."""


class Light:
    def __init__(self, location: str = "Living Room") -> None:
        self.location = location
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return f"{self.location} light is ON"

    def off(self) -> str:
        self.is_on = False
        return f"{self.location} light is OFF"


class Fan:
    def __init__(self, location: str = "Bedroom") -> None:
        self.location = location
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return f"{self.location} fan is ON"

    def off(self) -> str:
        self.is_on = False
        return f"{self.location} fan is OFF"
