from typing import List
from .cost import CostModel
from .utils import LRUCache, ascii_lower

INF = float('inf')

def _joins(piece: str, last: str) -> bool:
  """
    should `piece` be glued onto the token emitted just before it (which sits after it in the text)?
    eg: "'" + "s" -> "'s", "john" + "'s" -> "john's", "2" + "023" -> "2023"
  """
  if piece == "'": return True
  if last.startswith("'"): return True
  return piece[-1].isdigit() and last[0].isdigit()

def split_words(model: CostModel, s: str) -> List[str]:
  """
    minimum-cost partition of `s` into dictionary words
    unknown substrings cost +inf, ties go to the shorter trailing word so a run
    nobody knows falls back to single characters (and digit runs get re-joined)
  """
  n = len(s)
  if n == 0: return []
  cost, back = [0.0] * (n + 1), [0] * (n + 1)
  folded, max_len = ascii_lower(s), max(model.max_word_len, 1)

  for i in range(1, n + 1):
    best, best_k = INF, 0
    for k in range(1, min(i, max_len) + 1):
      word_cost = model.lookup(folded[i - k:i])
      c = cost[i - k] + (INF if word_cost is None else word_cost)
      if best_k == 0 or c < best: best, best_k = c, k
    cost[i], back[i] = best, best_k

  out, i = [], n
  while i > 0:
    k = back[i]
    piece = s[i - k:i]
    if out and _joins(piece, out[-1]): out[-1] = piece + out[-1]
    else: out.append(piece)
    i -= k

  return out[::-1]

class Segmenter:
  def __init__(self, model: CostModel, cache_size: int = 20000):
    self.model = model
    self.cache = LRUCache(cache_size)

  def split_words(self, text: str) -> List[str]:
    with self.model.lock.read():
      cache_key = (text, self.model.generation)
      cached = self.cache.get(cache_key)
      if cached is not None: return list(cached)
      result = split_words(self.model, text)
    self.cache.put(cache_key, tuple(result))
    return result
