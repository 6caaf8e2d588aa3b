from adventure.backend.engine.scheduler.scheduler import Scheduler, Timer

__all__ = ["Scheduler", "Timer"]
