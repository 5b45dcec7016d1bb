"""Tests for Normalizer and truncation."""

from prism_analysis.data import FetchResult, NewsArticle, RawRecord, RedditPost, WebResult
from prism_analysis.normalize import Normalizer, truncate


def test_truncate_leaves_short_text() -> None:
    assert truncate("short text", 100) == "short text"


def test_truncate_on_word_boundary() -> None:
    text = "alpha beta gamma delta epsilon"
    result = truncate(text, 20)
    assert len(result) <= 20
    assert result.endswith("...")
    assert result == "alpha beta gamma..."


def test_reddit_post_mapping() -> None:
    post = RedditPost(
        url="https://i.redd.it/x.jpg",
        title="  EVs   are great ",
        selftext="I switched\n\nlast year.",
        author="driver1",
        subreddit="electricvehicles",
        score=120,
        num_comments=45,
        created_utc=1760000000.0,
        permalink="https://reddit.com/r/electricvehicles/comments/abc/",
    )
    doc = Normalizer().to_document("Reddit", post)

    assert doc is not None
    assert doc.source == "Reddit"
    assert doc.title == "EVs are great"
    assert doc.snippet == "I switched last year."
    assert doc.url == "https://reddit.com/r/electricvehicles/comments/abc/"
    assert doc.metadata == {
        "subreddit": "electricvehicles",
        "author": "driver1",
        "score": 120,
        "comments": 45,
        "created_utc": 1760000000.0,
    }


def test_reddit_link_post_uses_title_as_snippet() -> None:
    doc = Normalizer().to_document("Reddit", RedditPost(title="Link only"))
    assert doc is not None
    assert doc.snippet == "Link only"


def test_web_and_news_mapping() -> None:
    normalizer = Normalizer()
    web = normalizer.to_document(
        "Web",
        WebResult(url="https://a.example", title="A", snippet="aa", author="Jane"),
    )
    news = normalizer.to_document(
        "News",
        NewsArticle(url="https://b.example", title="B", description="bb", publisher="Daily"),
    )

    assert web is not None and news is not None
    assert web.metadata == {"author": "Jane"}
    assert news.snippet == "bb"
    assert news.metadata == {"publisher": "Daily"}


def test_drops_empty_and_unknown_records() -> None:
    results = [
        FetchResult(
            source="Web",
            records=(
                WebResult(url="https://empty.example", title="  ", snippet=""),
                RawRecord(url="https://unknown.example"),
                WebResult(url="https://ok.example", title="Kept"),
            ),
        )
    ]
    documents = Normalizer().normalize(results)
    assert [d.title for d in documents] == ["Kept"]


def test_keeps_registration_order() -> None:
    results = [
        FetchResult(source="B", records=(WebResult(title="b1"), WebResult(title="b2"))),
        FetchResult.failure("C", "down"),
        FetchResult(source="A", records=(NewsArticle(title="a1"),)),
    ]
    documents = Normalizer().normalize(results)
    assert [(d.source, d.title) for d in documents] == [("B", "b1"), ("B", "b2"), ("A", "a1")]


def test_snippet_and_document_limits() -> None:
    records = tuple(WebResult(title=f"t{i}", snippet="word " * 100) for i in range(5))
    normalizer = Normalizer(max_snippet_chars=50, max_documents=3)

    documents = normalizer.normalize([FetchResult(source="Web", records=records)])

    assert len(documents) == 3
    assert all(len(d.snippet) <= 50 for d in documents)
    assert documents[0].snippet.endswith("...")
