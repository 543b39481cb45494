# ripplesnake/log.py
import logging

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        raise ValueError(f"unknown log level {level!r}")
    logging.basicConfig(level=lvl, format=FORMAT)
