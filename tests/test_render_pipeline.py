import logging

import pytest

from docpage.ingest.markdown import HeadingExtractorConfig, MarkdownHeadingExtractor
from docpage.ingest.toc_builder import TOCBuilder
from docpage.models.heading import HeadingRecord
from docpage.render.composer import NO_HEADINGS_NOTICE, DocumentComposer
from docpage.render.engine import MarkdownEngine, MarkdownEngineConfig
from docpage.render.pipeline import RenderPipeline
from docpage.render.sinks import RecordingHeadingSink


class StubExtractor:
    def __init__(self, headings) -> None:
        self.headings = headings
        self.sources = []

    def extract(self, source):
        self.sources.append(source)
        return list(self.headings)


class StubEngine:
    def __init__(self) -> None:
        self.sink = RecordingHeadingSink()
        self.calls = []

    def convert(self, source, *, sink=None):
        self.calls.append((source, sink))
        return "<p>body</p>"


class FailingEngine(StubEngine):
    def convert(self, source, *, sink=None):
        raise RuntimeError("engine exploded")


def _pipeline(**kwargs):
    kwargs.setdefault("engine", MarkdownEngine(sink=RecordingHeadingSink()))
    return RenderPipeline(**kwargs)


def test_pipeline_feeds_the_same_source_down_both_paths():
    extractor = StubExtractor([HeadingRecord(level=1, title="A", slug="a")])
    engine = StubEngine()
    pipeline = RenderPipeline(extractor=extractor, engine=engine)

    html = pipeline.render("# A\n")

    assert extractor.sources == ["# A\n"]
    assert engine.calls == [("# A\n", None)]
    assert html.startswith('<nav id="toc">')
    assert html.endswith("<p>body</p>")


def test_pipeline_render_links_toc_to_body_anchors():
    source = "# Design Patterns\n\nIntro.\n\n## Creational Design Patterns\n\n### Singleton\n"

    html = _pipeline().render(source)

    for slug in ("design-patterns", "creational-design-patterns", "singleton"):
        assert f'<a href="#{slug}">' in html
        assert f'id="{slug}"' in html
    assert html.index('<nav id="toc">') < html.index('<h1 id="design-patterns">')


def test_pipeline_prepends_notice_when_document_has_no_headings():
    html = _pipeline().render("Just a paragraph.\n")

    assert html == NO_HEADINGS_NOTICE + "<p>Just a paragraph.</p>"


def test_pipeline_render_document_exposes_parts():
    document = _pipeline().render_document("## Section One\ntext\n### Sub")

    assert [h.slug for h in document.headings] == ["section-one", "sub"]
    assert document.toc_html.count("<a href=") == 2
    assert '<h3 id="sub">Sub</h3>' in document.body_html


def test_raw_toc_keeps_fenced_code_headings_and_markup_slugs():
    source = "## **Un**important notes\n\n```\n# not a heading\n```\n"

    document = _pipeline().render_document(source)

    assert [h.slug for h in document.headings] == ["un-important-notes", "not-a-heading"]
    assert '<a href="#un-important-notes">**Un**important notes</a>' in document.toc_html
    assert 'id="un-important-notes"' not in document.body_html


def test_rendered_toc_uses_the_engine_headings():
    source = "## **Un**important notes\n\n```\n# not a heading\n```\n"
    sink = RecordingHeadingSink()
    pipeline = RenderPipeline(engine=MarkdownEngine(sink=sink), toc_source="rendered")

    document = pipeline.render_document(source)

    assert document.headings == (HeadingRecord(level=2, title="Unimportant notes", slug="unimportant-notes"),)
    assert '<a href="#unimportant-notes">Unimportant notes</a>' in document.toc_html
    assert 'id="unimportant-notes"' in document.body_html
    assert sink.headings == list(document.headings)


def test_unique_slugs_stay_in_step_across_passes():
    source = "## Usage\n\ntext\n\n## Usage\n"
    pipeline = RenderPipeline(
        extractor=MarkdownHeadingExtractor(HeadingExtractorConfig(unique_slugs=True)),
        engine=MarkdownEngine(MarkdownEngineConfig(unique_slugs=True), sink=RecordingHeadingSink()),
    )

    document = pipeline.render_document(source)

    assert [h.slug for h in document.headings] == ["usage", "usage-1"]
    assert 'id="usage"' in document.body_html and 'id="usage-1"' in document.body_html


def test_pipeline_propagates_engine_failures():
    pipeline = RenderPipeline(extractor=StubExtractor([]), engine=FailingEngine())

    with pytest.raises(RuntimeError, match="engine exploded"):
        pipeline.render("# A\n")


def test_pipeline_logs_engine_failure_before_reraising(caplog):
    pipeline = RenderPipeline(extractor=StubExtractor([]), engine=FailingEngine())

    with caplog.at_level(logging.DEBUG, logger="docpage.render.pipeline"):
        with pytest.raises(RuntimeError, match="engine exploded"):
            pipeline.render("# A\n")

    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].name == "docpage.render.pipeline"
    assert "markdown.convert failed" in errors[0].getMessage()
    assert "on 4 chars: RuntimeError: engine exploded" in errors[0].getMessage()


def test_pipeline_logs_step_timings_at_debug(caplog):
    extractor = StubExtractor([HeadingRecord(level=1, title="A", slug="a")])
    pipeline = RenderPipeline(extractor=extractor, engine=StubEngine())

    with caplog.at_level(logging.DEBUG, logger="docpage.render.pipeline"):
        pipeline.render("# A\n")

    messages = [record.getMessage() for record in caplog.records if record.name == "docpage.render.pipeline"]
    assert messages[0].startswith("toc.extract: 1 headings in ")
    assert messages[1].startswith("markdown.convert: 4 chars to 11 html chars in ")


def test_pipeline_rejects_unknown_toc_source():
    with pytest.raises(ValueError):
        RenderPipeline(toc_source="outline")


def test_pipeline_accepts_custom_components():
    pipeline = _pipeline(
        toc_builder=TOCBuilder(),
        composer=DocumentComposer(fallback_notice="<p>nothing here</p>"),
    )

    assert pipeline.render("plain") == "<p>nothing here</p><p>plain</p>"
