"""Cancellable delayed calls for the automated player's "thinking" pause."""

import threading


class DelayedCall:
    """Run fn(*args) after `delay` seconds on a timer thread unless cancelled first."""

    def __init__(self, delay, fn, *args):
        self.delay = delay
        self._timer = threading.Timer(delay, fn, args=args)
        self._timer.daemon = True
        self._timer.start()

    def cancel(self):
        self._timer.cancel()

    @property
    def active(self):
        return self._timer.is_alive()


def schedule(delay, fn, *args):
    return DelayedCall(delay, fn, *args)
