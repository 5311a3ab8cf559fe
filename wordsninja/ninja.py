from typing import Dict, Iterable, List, Optional, Union
from .config import SplitOptions
from .utils.cost import CostModel, build_cost_model, load_word_list
from .utils.pipeline import split_sentence
from .utils.segment import Segmenter

class WordsNinja:
  """split text without spaces into english words, eg: 'thisisatest' -> ['this', 'is', 'a', 'test']"""
  def __init__(self, words: Optional[Iterable[str]] = None, cache_size: int = 20000):
    self.cache_size = cache_size
    self.model: Optional[CostModel] = None
    self.segmenter: Optional[Segmenter] = None
    if words is not None: self._set_model(build_cost_model(words))

  @classmethod
  def from_words(cls, words: Iterable[str], **kwargs) -> "WordsNinja": return cls(words, **kwargs)

  def _set_model(self, model: CostModel):
    self.model, self.segmenter = model, Segmenter(model, self.cache_size)

  def _require_model(self) -> Segmenter:
    if self.segmenter is None: raise RuntimeError("No dictionary loaded. Call load_dictionary() first.")
    return self.segmenter

  def load_dictionary(self, path: str) -> Dict[str, float]:
    words = load_word_list(path)
    self._set_model(build_cost_model(words))
    print(f"Loaded {len(self.model)} words from dictionary (max word length {self.model.max_word_len})")
    return self.model.cost

  def add_words(self, words: Union[str, Iterable[str]]):
    self._require_model()
    self.model.extend(words)

  def split_words(self, text: str) -> List[str]: return self._require_model().split_words(text)

  def split_sentence(self, text: str, options: Optional[SplitOptions] = None, **kwargs) -> Union[List[str], str]:
    return split_sentence(self._require_model(), text, options, **kwargs)
