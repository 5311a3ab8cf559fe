import regex as re
from typing import Callable, List, Optional, Union
from .cost import CostModel
from .segment import Segmenter
from ..config import SplitOptions

SPLIT_PATTERN = re.compile(r"[^a-zA-Z0-9']+")
CAMEL_PATTERN = re.compile(r"[A-Z]?[^A-Z]+|[A-Z]")

def split_camel_case(text: Optional[str]) -> str:
  """
    'fooBarBaz qux' -> 'foo bar baz qux'
    the upper-case letter only marked a boundary, so it gets folded once the space is in
  """
  parts = []
  for chunk in (text or '').strip().split(' '):
    if not chunk: continue
    humps = CAMEL_PATTERN.findall(chunk)
    parts.append(' '.join(h[0].lower() + h[1:] if 'A' <= h[0] <= 'Z' else h for h in humps))
  return ' '.join(parts)

def split_separators(text: str) -> List[str]:
  return [chunk for chunk in SPLIT_PATTERN.split(text) if chunk]

def capitalize_first_letter(word: str) -> str: return word[:1].upper() + word[1:]

def join_words(words: List[str]) -> str: return ' '.join(words)

def build_pipeline(options: SplitOptions):
  """
    turns the flags into the list of steps around segmentation
    returns (text steps run before splitting, token steps run per token, final step)
  """
  before: List[Callable[[str], str]] = [split_camel_case] if options.camel_case_splitter else []
  per_token: List[Callable[[str], str]] = [capitalize_first_letter] if options.capitalize_first_letter else []
  finish = join_words if options.join_words else list
  return before, per_token, finish

def split_sentence(model: Union[CostModel, Segmenter], text: str, options: Optional[SplitOptions] = None, **kwargs) -> Union[List[str], str]:
  if options is None: options = SplitOptions.from_dict(kwargs)
  elif kwargs: raise TypeError("pass either an options object or keyword options, not both")
  segmenter = model if isinstance(model, Segmenter) else Segmenter(model, cache_size=0)
  before, per_token, finish = build_pipeline(options)

  for step in before: text = step(text)
  words = []
  for chunk in split_separators(text):
    for word in segmenter.split_words(chunk):
      for step in per_token: word = step(word)
      words.append(word)
  return finish(words)
