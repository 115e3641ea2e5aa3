import logging, sys
from typing import Optional

def get_logger(name:str, level:Optional[str]=None):
    l=logging.getLogger(name)
    if not l.handlers:
        # stdout is reserved for the result lines
        h=logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter('%(asctime)s | %(levelname)s | %(name)s | %(message)s'))
        l.addHandler(h)
        l.propagate=False
        l.setLevel(level or 'INFO')
    elif level is not None:
        l.setLevel(level)
    return l
