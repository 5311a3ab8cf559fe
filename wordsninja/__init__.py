from .config import SplitOptions
from .ninja import WordsNinja
from .utils.cost import CostModel, EmptyDictionaryError, build_cost_model, extend, load_word_list
from .utils.segment import Segmenter, split_words
from .utils.pipeline import split_sentence

__version__ = "0.1.0"
