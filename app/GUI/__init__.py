from .tester_window import TesterWindow

__all__ = [
    'TesterWindow',
]
