from assetrev.finder import MappingRevvedFinder
from assetrev.processor import CSS_PATTERNS, CSSProcessor


def test_css_processor_rewrites_url_references(revvedfinder):
    content = '.a { background: url("image.png"); }\n.b { background: url( \'image.png\' ); }'
    cp = CSSProcessor("style.css", content, revvedfinder)
    assert cp.process() == '.a { background: url("1234.image.png"); }\n.b { background: url( \'1234.image.png\' ); }'


def test_css_processor_only_knows_urls():
    assert [p.name for p in CSS_PATTERNS] == ["url"]
    finder = MappingRevvedFinder({"a.png": "1.a.png"})
    content = '/* <img src="a.png"> */ .x { background: url("a.png"); }'
    cp = CSSProcessor("style.css", content, finder)
    assert cp.process() == '/* <img src="a.png"> */ .x { background: url("1.a.png"); }'


def test_css_processor_leaves_external_urls(revvedfinder):
    content = '.a { background: url("http://cdn/image.png"); }\n.b { background: url("data:image/png;base64,AAAA"); }'
    cp = CSSProcessor("style.css", content, revvedfinder)
    assert cp.process() == content


def test_css_processor_reports_changes(revvedfinder):
    messages = []
    cp = CSSProcessor("css/style.css", '.a { background: url("image.png"); }', revvedfinder, messages.append)
    cp.process()
    assert messages[0] == "Update the CSS with new img filenames"
    assert 'url("image.png") changed to url("1234.image.png")' in messages
