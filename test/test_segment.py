import threading
import pytest
from wordsninja import build_cost_model, split_words, Segmenter

@pytest.fixture
def model():
  return build_cost_model(["this", "is", "a", "test", "the", "john", "s", "it", "t", "don", "thistle", "an", "apple", "pie"])

def test_splits_known_words(model):
  assert split_words(model, "thisisatest") == ["this", "is", "a", "test"]

def test_prefers_cheaper_partition(model):
  assert split_words(model, "anapplepie") == ["an", "apple", "pie"]

def test_keeps_original_case(model):
  assert split_words(model, "ThisIsATest") == ["This", "Is", "A", "Test"]

def test_empty_input(model):
  assert split_words(model, "") == []

def test_unknown_input_falls_back_to_characters(model):
  result = split_words(model, "xyz")
  assert result == ["x", "y", "z"]
  assert "".join(result) == "xyz"

def test_unknown_suffix_keeps_known_prefix(model):
  result = split_words(model, "thisisqqq")
  assert result[:2] == ["this", "is"]
  assert "".join(result) == "thisisqqq"

@pytest.mark.parametrize("text", ["thisisatest", "qwertyuiop", "thistle", "atestxthe", "a1b22c333"])
def test_output_reconstructs_input(model, text):
  assert "".join(split_words(model, text)) == text

def test_digit_runs_join(model):
  assert split_words(model, "2023") == ["2023"]
  assert split_words(model, "test2023") == ["test", "2023"]
  assert split_words(model, "a1b22") == ["a", "1", "b", "22"]

def test_possessive_attaches_to_word(model):
  assert split_words(model, "john's") == ["john's"]
  assert split_words(model, "isjohn's") == ["is", "john's"]

def test_contraction_attaches_to_word(model):
  assert split_words(model, "don't") == ["don't"]

def test_lone_apostrophe(model):
  assert split_words(model, "'") == ["'"]

def test_added_word_is_picked_up(model):
  segmenter = Segmenter(model)
  assert segmenter.split_words("ninjatest") != ["ninja", "test"]
  model.extend("ninja")
  assert segmenter.split_words("ninjatest") == ["ninja", "test"]

def test_segmenter_cache_returns_copies(model):
  segmenter = Segmenter(model)
  first = segmenter.split_words("thisisatest")
  first.append("mutated")
  assert segmenter.split_words("thisisatest") == ["this", "is", "a", "test"]
  assert len(segmenter.cache) == 1

def test_concurrent_reads_and_extend(model):
  segmenter = Segmenter(model, cache_size=0)
  errors = []

  def read():
    try:
      for _ in range(200): assert "".join(segmenter.split_words("thisisatest")) == "thisisatest"
    except AssertionError as e: errors.append(e)

  threads = [threading.Thread(target=read) for _ in range(4)]
  for t in threads: t.start()
  for i in range(50): model.extend(f"word{i}")
  for t in threads: t.join()

  assert not errors
  assert "word49" in model

if __name__ == "__main__":
  pytest.main([__file__, "-v"])
