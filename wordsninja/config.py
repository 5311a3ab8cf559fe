from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

_CAMEL_KEYS = {
  "camelCaseSplitter": "camel_case_splitter",
  "capitalizeFirstLetter": "capitalize_first_letter",
  "joinWords": "join_words",
}

@dataclass(frozen=True)
class SplitOptions:
  """Options for :func:`wordsninja.split_sentence`.

  Each flag switches on one independent step of the sentence pipeline:
  camel-case pre-splitting, capitalizing every token, and joining the tokens
  into a single space-separated string.
  """

  camel_case_splitter: bool = False
  capitalize_first_letter: bool = False
  join_words: bool = False

  def to_dict(self) -> Dict[str, Any]:
    return asdict(self)

  @staticmethod
  def from_dict(d: Dict[str, Any]) -> "SplitOptions":
    known = {f.name for f in fields(SplitOptions)}
    kwargs = {}
    for key, value in d.items():
      name = _CAMEL_KEYS.get(key, key)
      if name not in known: raise ValueError(f"Unknown split option: {key!r}")
      kwargs[name] = bool(value)
    return SplitOptions(**kwargs)
