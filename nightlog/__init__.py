"""nightlog - sleep metrics and time-arithmetic engine"""

__version__ = "0.1.0"
