from .cost import CostModel, EmptyDictionaryError, build_cost_model, extend, load_word_list
from .segment import Segmenter, split_words
from .pipeline import split_sentence, split_camel_case, split_separators, capitalize_first_letter, join_words
