from baike_pages import (
    APPLE_FRUIT_PAGE,
    BASE,
    THREE_RESULTS_PAGE,
    entry_page,
    search_page,
)

from baikebot.agent.tools.baike.document import DocumentTree
from baikebot.agent.tools.baike.extract import (
    ELLIPSIS,
    count_results,
    extract_content,
    extract_results,
    has_no_result,
    resolve_link,
    strip_branding,
)


def _tree(html: str) -> DocumentTree:
    return DocumentTree.parse(html)


def test_strip_branding_variants() -> None:
    assert strip_branding("苹果_百度百科") == "苹果"
    assert strip_branding("苹果公司 - 百度百科 ") == "苹果公司"
    assert strip_branding("  苹果百度百科") == "苹果"
    assert strip_branding("百度百科全书 词条") == "百度百科全书 词条"


def test_extract_results_strips_branding_and_trims() -> None:
    results = extract_results(_tree(THREE_RESULTS_PAGE), limit=10)

    assert [r.rank for r in results] == [0, 1, 2]
    assert [r.title for r in results] == ["苹果", "苹果公司", "苹果（2007年电影）"]
    assert [r.description for r in results] == ["蔷薇科苹果属果实", "美国科技公司", "李玉执导电影"]


def test_extract_results_respects_limit() -> None:
    tree = _tree(THREE_RESULTS_PAGE)

    assert len(extract_results(tree, limit=2)) == 2
    assert len(extract_results(tree, limit=1)) == 1
    assert count_results(tree) == 3


def test_extract_results_empty_page() -> None:
    assert extract_results(_tree("<html><body></body></html>"), limit=3) == []


def test_has_no_result_markers() -> None:
    assert has_no_result(_tree('<div class="no-result"></div>'))
    assert has_no_result(_tree('<a class="create-entrance">create</a>'))
    assert not has_no_result(_tree(THREE_RESULTS_PAGE))


def test_resolve_link_rewrites_relative_entry_paths() -> None:
    tree = _tree(THREE_RESULTS_PAGE)

    assert resolve_link(tree, 0) == f"{BASE}/item/apple-fruit"
    assert resolve_link(tree, 1, base_url="https://mirror.example/") == "https://mirror.example/item/apple-inc"


def test_resolve_link_keeps_absolute_urls() -> None:
    assert resolve_link(_tree(THREE_RESULTS_PAGE), 2) == f"{BASE}/item/apple-film"

    tree = _tree(search_page(("外链", "https://other.example/page", "")))
    assert resolve_link(tree, 0) == "https://other.example/page"


def test_resolve_link_clamps_negative_rank() -> None:
    assert resolve_link(_tree(THREE_RESULTS_PAGE), -5) == f"{BASE}/item/apple-fruit"


def test_resolve_link_absent_cases() -> None:
    tree = _tree(THREE_RESULTS_PAGE)

    assert resolve_link(tree, 3) is None
    assert resolve_link(tree, 100) is None
    assert resolve_link(_tree("<html></html>"), 0) is None
    assert resolve_link(_tree(search_page(("无链接", None, ""))), 0) is None


def test_extract_content_full_entry() -> None:
    link = f"{BASE}/item/apple-fruit"
    record = extract_content(_tree(APPLE_FRUIT_PAGE), link, max_summary_length=200)

    assert record.title == "苹果"
    assert record.summary == "苹果是蔷薇科苹果属植物的果实，营养丰富。"
    assert "[1]" not in record.summary
    assert record.thumbnail == "https://bkimg.cdn.bcebos.com/pic/apple.jpg"
    assert record.tip == "同义词 平安果一般指苹果"
    assert record.link == link


def test_extract_content_truncates_with_hard_cut() -> None:
    html = entry_page("长文", "  " + "一二三四五" * 10 + "  ")
    record = extract_content(_tree(html), "https://x", max_summary_length=12)

    assert record.summary == "一二三四五一二三四五一二" + ELLIPSIS
    assert len(record.summary) == 12 + len(ELLIPSIS)


def test_extract_content_exact_length_is_untouched() -> None:
    html = entry_page("短文", "一二三四五")
    record = extract_content(_tree(html), "https://x", max_summary_length=5)

    assert record.summary == "一二三四五"


def test_extract_content_citations_do_not_count_towards_length() -> None:
    html = entry_page("引用", "一二三<sup>[12]</sup>四五")
    record = extract_content(_tree(html), "https://x", max_summary_length=5)

    assert record.summary == "一二三四五"


def test_extract_content_missing_optional_regions() -> None:
    record = extract_content(_tree("<html><body></body></html>"), "https://x/item/y", 10)

    assert record.title == ""
    assert record.summary == ""
    assert record.thumbnail is None
    assert record.tip == ""
    assert record.link == "https://x/item/y"
