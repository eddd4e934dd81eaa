from .play_logger import PlayLogger

__all__ = ['PlayLogger']
