"""
串流轉換範例 - 展示拼音衍生詞元的輸出

這個範例展示如何把分詞結果接上 PinyinTransformFilter，
逐一取得原詞元與其拼音衍生詞元（含位置增量），
可直接對應到搜尋索引的 term / position 寫入。
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pinyinstream import OutputType, PinyinTransformConfig, PinyinTransformEngine


def demo_stream(engine, text):
    """逐一拉取輸出詞元並印出位置"""
    position = -1
    for token in engine.create_filter(engine.tokenizer.iter_tokens(text)):
        position += token.position_increment
        tag = "🔤" if token.type == "pinyin" else "📝"
        print(f"  {tag} pos={position:<3} [{token.start_offset}:{token.end_offset}] {token.text}")


def main():
    article = "我在重慶長大 後來去北京 工作 Python 工程師"

    print("=" * 60)
    print("全拼 + 縮寫，保留原詞元")
    print("=" * 60)
    engine = PinyinTransformEngine(PinyinTransformConfig(output_type=OutputType.BOTH))
    demo_stream(engine, article)

    print()
    print("=" * 60)
    print("只輸出全拼，不保留原詞元，多音字上限 1")
    print("=" * 60)
    engine = PinyinTransformEngine(
        PinyinTransformConfig(keep_original=False, max_polyphone_freq=1),
    )
    demo_stream(engine, article)

    print()
    print(f"快取統計: {engine.get_cache_stats()}")


if __name__ == "__main__":
    main()
