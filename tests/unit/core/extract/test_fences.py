"""Unit tests for core/extract/fences.py"""

import pytest

from postmatter.core.extract.fences import TextSpan, split_fences
from postmatter.core.models import Block, FenceStyle


def _split(text: str, first_line: int = 1):
    return split_fences(text.splitlines(keepends=True), first_line)


@pytest.mark.parametrize("opener,closer,style,lang", [
    ("{% highlight java %}",         "{% endhighlight %}", FenceStyle.liquid,   "java"),
    ("{% highlight ruby linenos %}", "{% endhighlight %}", FenceStyle.liquid,   "ruby"),
    ("{%- highlight js -%}",         "{%- endhighlight -%}", FenceStyle.liquid, "js"),
    ("```python",                    "```",                FenceStyle.backtick, "python"),
    ("~~~",                          "~~~",                FenceStyle.tilde,    None),
])
def test_fence_styles(opener, closer, style, lang):
    """Each supported fence opener yields a closed code block with its language tag."""
    parts = _split(f"{opener}\nx = 1\n{closer}\n")
    assert len(parts) == 1
    block = parts[0]
    assert isinstance(block, Block)
    assert block.fence == style
    assert block.lang == lang
    assert block.closed
    assert block.code == "x = 1"


def test_text_and_code_interleave():
    """Text spans and code blocks come back in source order with offsets."""
    parts = _split("Intro\n\n{% highlight java %}\nint x;\n{% endhighlight %}\nOutro\n", first_line=10)
    assert [type(p) for p in parts] == [TextSpan, Block, TextSpan]
    assert parts[0].start == 0
    assert parts[1].line == 12
    assert parts[2].start == 5
    assert parts[2].lines == ["Outro\n"]


def test_unclosed_fence_runs_to_end():
    """A fence without a closing marker swallows the rest of the body."""
    parts = _split("{% highlight java %}\nclass A {}\n\nMore text\n")
    assert len(parts) == 1
    assert not parts[0].closed
    assert parts[0].code == "class A {}\n\nMore text"


def test_backtick_close_must_be_as_long():
    """A shorter backtick run does not close a longer fence."""
    parts = _split("````\n```\nnested\n```\n````\n")
    assert len(parts) == 1
    assert parts[0].closed
    assert parts[0].code == "```\nnested\n```"


def test_tilde_does_not_close_backtick():
    parts = _split("```\ncode\n~~~\n")
    assert len(parts) == 1
    assert not parts[0].closed


def test_markdown_fence_inside_liquid_is_opaque():
    """Backticks inside a highlight region are plain code text."""
    parts = _split("{% highlight md %}\n```\n{% endhighlight %}\nafter\n")
    assert [type(p) for p in parts] == [Block, TextSpan]
    assert parts[0].code == "```"


def test_inline_backticks_are_not_a_fence():
    """A backtick info string containing backticks is inline code, not a fence."""
    parts = _split("``` not `a fence` ```\n")
    assert [type(p) for p in parts] == [TextSpan]


def test_stray_endhighlight_is_text():
    parts = _split("{% endhighlight %}\n")
    assert [type(p) for p in parts] == [TextSpan]


def test_empty_body():
    assert split_fences([]) == []
