import collections, threading
from contextlib import contextmanager

_ASCII_FOLD = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

def ascii_lower(text: str) -> str:
  """
    locale-invariant case fold, only A-Z are touched
    eg: 'ÉcoleABC' -> 'Écoleabc'
  """
  return text.translate(_ASCII_FOLD)

class LRUCache:
  def __init__(self, capacity: int = 10000):
    self.capacity, self.cache = capacity, collections.OrderedDict()
    self._lock = threading.Lock()

  def get(self, key):
    with self._lock:
      if key in self.cache:
        self.cache.move_to_end(key)
        return self.cache[key]
      return None

  def put(self, key, value):
    if self.capacity <= 0: return
    with self._lock:
      if key in self.cache: self.cache.move_to_end(key)
      else:
        if len(self.cache) >= self.capacity: self.cache.popitem(last=False)
      self.cache[key] = value

  def __len__(self): return len(self.cache)

class ReadWriteLock:
  """
    many readers or a single writer; writers waiting block new readers
    so a stream of segmentation calls can't starve add_words()
  """
  def __init__(self):
    self._cond = threading.Condition(threading.Lock())
    self._readers, self._writer, self._waiting_writers = 0, False, 0

  def acquire_read(self):
    with self._cond:
      while self._writer or self._waiting_writers: self._cond.wait()
      self._readers += 1

  def release_read(self):
    with self._cond:
      self._readers -= 1
      if self._readers == 0: self._cond.notify_all()

  def acquire_write(self):
    with self._cond:
      self._waiting_writers += 1
      try:
        while self._writer or self._readers: self._cond.wait()
      finally: self._waiting_writers -= 1
      self._writer = True

  def release_write(self):
    with self._cond:
      self._writer = False
      self._cond.notify_all()

  @contextmanager
  def read(self):
    self.acquire_read()
    try: yield self
    finally: self.release_read()

  @contextmanager
  def write(self):
    self.acquire_write()
    try: yield self
    finally: self.release_write()
