"""
Booting a computer through a facade.

Starting a machine touches seven subsystems in a fixed order. The facade
gives callers one ``start_computer()`` call and keeps the ordering rules
inside.
"""

import structlog

from ..errors import OperationFailureError

logger = structlog.get_logger(__name__)


class PowerSupply:
    def __init__(self) -> None:
        self.is_on = False

    def provide_power(self) -> str:
        self.is_on = True
        return "Power Supply: Providing power..."

    def cut_power(self) -> str:
        self.is_on = False
        return "Power Supply: Power cut."


class CoolingSystem:
    def __init__(self) -> None:
        self.running = False

    def start_fans(self) -> str:
        self.running = True
        return "Cooling System: Fans started..."

    def stop_fans(self) -> str:
        self.running = False
        return "Cooling System: Fans stopped."


class Cpu:
    def __init__(self) -> None:
        self.initialized = False

    def initialize(self) -> str:
        self.initialized = True
        return "CPU: Initialization started..."

    def halt(self) -> str:
        self.initialized = False
        return "CPU: Halted."


class Memory:
    def __init__(self) -> None:
        self.tested = False

    def self_test(self) -> str:
        self.tested = True
        return "Memory: Self-test passed..."


class HardDrive:
    def __init__(self) -> None:
        self.spinning = False

    def spin_up(self) -> str:
        self.spinning = True
        return "Hard Drive: Spinning up..."

    def spin_down(self) -> str:
        self.spinning = False
        return "Hard Drive: Spun down."


class Bios:
    def boot(self, power: PowerSupply, cpu: Cpu, memory: Memory) -> list[str]:
        if not power.is_on:
            raise OperationFailureError("BIOS cannot boot without power",
                                        context={"subsystem": "bios"})
        return [
            "BIOS: Booting CPU and Memory checks...",
            cpu.initialize(),
            memory.self_test(),
        ]


class OperatingSystem:
    def __init__(self) -> None:
        self.loaded = False

    def load(self) -> str:
        self.loaded = True
        return "Operating System: Loading into memory..."

    def shutdown(self) -> str:
        self.loaded = False
        return "Operating System: Shutting down..."


class ComputerFacade:
    """Single entry point for starting and stopping the machine."""

    def __init__(self) -> None:
        self.power_supply = PowerSupply()
        self.cooling_system = CoolingSystem()
        self.cpu = Cpu()
        self.memory = Memory()
        self.hard_drive = HardDrive()
        self.bios = Bios()
        self.os = OperatingSystem()

    @property
    def is_running(self) -> bool:
        return self.os.loaded

    def start_computer(self) -> list[str]:
        if self.is_running:
            return ["Computer is already running."]

        steps = ["----- Starting Computer -----"]
        steps.append(self.power_supply.provide_power())
        steps.append(self.cooling_system.start_fans())
        steps.extend(self.bios.boot(self.power_supply, self.cpu, self.memory))
        steps.append(self.hard_drive.spin_up())
        steps.append(self.os.load())
        steps.append("Computer Booted Successfully!")

        logger.info("Computer started", steps=len(steps))
        return steps

    def shutdown_computer(self) -> list[str]:
        if not self.is_running:
            return ["Computer is already off."]

        steps = ["----- Shutting Down Computer -----"]
        steps.append(self.os.shutdown())
        steps.append(self.hard_drive.spin_down())
        steps.append(self.cpu.halt())
        steps.append(self.cooling_system.stop_fans())
        steps.append(self.power_supply.cut_power())

        logger.info("Computer stopped", steps=len(steps))
        return steps
