"""
Shared fixtures: a small, self-contained data directory and estimators reading it.
"""

import gzip
import random
import sys
from pathlib import Path

import msgpack
import pytest

# Add the parent directory to path to import lexfreq
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexfreq.estimator import WordFrequencyEstimator
from lexfreq.types import LexFreqConfig

CB_HEADER = {"format": "cB", "version": 1}

# Bucket index -> words. Bucket i holds words with frequency 10 ** (-i / 100).
EN_SMALL = {
    140: ["the"],
    150: ["of", "and"],
    200: ["hello", "world"],
    210: ["café"],
    250: ["can't", "it's"],
    300: ["0000", "00"],
    400: ["rare"],
}
EN_LARGE = {
    130: ["the"],
    150: ["of", "and"],
    200: ["hello", "world"],
    210: ["café"],
    250: ["can't", "it's"],
    300: ["0000", "00"],
    450: ["rarer"],
}
FR_SMALL = {120: ["de"], 160: ["le"], 200: ["bonjour"]}
PT_BR_SMALL = {150: ["que"]}
ZH_SMALL = {
    200: ["的"],
    250: ["你", "好"],
    260: ["世", "界"],
    270: ["汉", "字"],
    300: ["你好", "世界"],
    350: ["汉字"],
}

SIMPLIFIED_MAP = {ord("漢"): "汉", ord("體"): "体", ord("們"): "们"}

JIEBA_DICT = "\n".join(
    [
        "你好 1000",
        "世界 1000",
        "汉字 800",
        "你 10",
        "好 10",
        "世 10",
        "界 10",
        "汉 10",
        "字 10",
    ],
)


def build_buckets(placements: dict[int, list[str]]) -> list[list[str]]:
    """Expand a sparse {bucket index: words} mapping into a full bucket array."""
    buckets: list[list[str]] = [[] for _ in range(max(placements) + 1)]
    for index, words in placements.items():
        buckets[index] = list(words)
    return buckets


def write_msgpack(path: Path, data) -> None:
    with gzip.open(path, "wb") as outfile:
        outfile.write(msgpack.packb(data, use_bin_type=True))


def write_cbpack(path: Path, placements: dict[int, list[str]], header=None) -> None:
    write_msgpack(path, [header or CB_HEADER, *build_buckets(placements)])


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory with English, French, Brazilian Portuguese and Chinese tables."""
    directory = tmp_path / "data"
    directory.mkdir()
    write_cbpack(directory / "small_en.msgpack.gz", EN_SMALL)
    write_cbpack(directory / "large_en.msgpack.gz", EN_LARGE)
    write_cbpack(directory / "small_fr.msgpack.gz", FR_SMALL)
    write_cbpack(directory / "small_pt-BR.msgpack.gz", PT_BR_SMALL)
    write_cbpack(directory / "small_zh.msgpack.gz", ZH_SMALL)
    write_msgpack(directory / "_chinese_mapping.msgpack.gz", SIMPLIFIED_MAP)
    (directory / "jieba_zh.txt").write_text(JIEBA_DICT + "\n", encoding="utf-8")
    (directory / "jieba_zh_orig.txt").write_text(JIEBA_DICT + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def config(data_dir: Path) -> LexFreqConfig:
    return LexFreqConfig.create_default().with_data_dir(data_dir)


@pytest.fixture
def estimator(config: LexFreqConfig) -> WordFrequencyEstimator:
    """Estimator with deterministic randomness and no dictionary segmenter."""
    return WordFrequencyEstimator(config, segmenter_backend="fallback", rng=random.Random(1234))


@pytest.fixture
def jieba_estimator(config: LexFreqConfig) -> WordFrequencyEstimator:
    pytest.importorskip("jieba")
    return WordFrequencyEstimator(config, segmenter_backend="jieba")
