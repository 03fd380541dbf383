from .activity_subscriber import ActivitySubscriber, SignalHandlerFn, Subscription

__all__ = ["ActivitySubscriber", "SignalHandlerFn", "Subscription"]
