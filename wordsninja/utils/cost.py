import math, os
from typing import Dict, Iterable, List, Optional, Union
from .utils import ReadWriteLock, ascii_lower

class EmptyDictionaryError(ValueError):
  """raised when a cost model is built from zero words"""

class CostModel:
  """
    word -> cost table built from a ranked word list (most frequent first)
    cost(word) = ln((rank + 1) * ln(W)), so lower cost == more common word

    max_word_len bounds the segmentation lookback window, max_cost is the cost
    of the rank-1 word and is what every word added later gets
  """
  def __init__(self, cost: Dict[str, float], max_word_len: int, max_cost: float):
    self.cost, self.max_word_len, self.max_cost = cost, max_word_len, max_cost
    self.generation = 0
    self.lock = ReadWriteLock()

  def lookup(self, word: str) -> Optional[float]: return self.cost.get(word)

  def extend(self, words: Union[str, Iterable[str]]):
    if isinstance(words, str): words = [words]
    with self.lock.write():
      for word in words:
        word = ascii_lower(word)
        if not word: continue
        self.cost[word] = self.max_cost
        if len(word) > self.max_word_len: self.max_word_len = len(word)
      self.generation += 1

  def __len__(self): return len(self.cost)
  def __contains__(self, word): return word in self.cost
  def __repr__(self): return f"CostModel(words={len(self.cost)}, max_word_len={self.max_word_len}, max_cost={self.max_cost:.4f})"

def build_cost_model(words: Iterable[str]) -> CostModel:
  words = list(words)
  if not words: raise EmptyDictionaryError("cannot build a cost model from an empty word list")

  # a single-word list would give ln(1) == 0 and every cost -inf
  log_total = math.log(max(len(words), 2))
  cost, max_word_len, max_cost = {}, 0, float('inf')
  for rank, word in enumerate(words):
    word = ascii_lower(word)
    cost[word] = math.log((rank + 1) * log_total)
    if len(word) > max_word_len: max_word_len = len(word)
    if cost[word] < max_cost: max_cost = cost[word]
  return CostModel(cost, max_word_len, max_cost)

def extend(model: CostModel, words: Union[str, Iterable[str]]): model.extend(words)

def load_word_list(path: str) -> List[str]:
  """reads a ranked dictionary file, one word per line, blank lines skipped"""
  if not os.path.exists(path): raise IOError(f"Dictionary file does not exist: {path}")
  words = []
  with open(path, 'r', encoding='utf-8') as f:
    for line in f:
      line = line.strip()
      if line: words.append(line)
  return words
