"""Shared sample posts and fixtures"""

import pytest


# Line layout (1-based):
#   1-7   front matter          8   intro paragraph
#   10    ## Singleton          12  paragraph       14-25  highlight java
#   27    ## Factory            29  ### Simple factory
#   31    paragraph             33-35  highlight java
#   37    ## Builder            39  paragraph       41-46  highlight java
CREATIONAL_POST = """\
---
layout: post
title:  "Creational Design Patterns"
date:   2017-03-28 09:07:22
description: "Singleton, Factory and Builder patterns explained with Java examples"
categories: java design-patterns
---
Creational patterns deal with how objects get created.

## Singleton

A singleton guarantees that a class has exactly one instance.

{% highlight java %}
public class Registry {
    private static Registry instance;

    public static synchronized Registry getInstance() {
        if (instance == null) {
            instance = new Registry();
        }
        return instance;
    }
}
{% endhighlight %}

## Factory

### Simple factory

A factory hides which concrete class gets instantiated.

{% highlight java %}
Phone phone = PhoneFactory.create("Pixel");
{% endhighlight %}

## Builder

A builder assembles a complex object step by step.

{% highlight java %}
Computer pc = new Computer.Builder()
    .ram(16)
    .storage(512)
    .build();
{% endhighlight %}
"""

MINIMAL_POST = """\
---
layout: post
title: Hello
---
Body text.
"""

UNCLOSED_POST = """\
---
layout: post
title: Broken fence
---
Intro.

{% highlight java %}
class Oops {}
"""


@pytest.fixture(name="post_text")
def post_text_fixture():
    return CREATIONAL_POST


@pytest.fixture(name="post_file")
def post_file_fixture(tmp_path):
    f = tmp_path / "2017-03-28-creational-design-patterns.md"
    f.write_text(CREATIONAL_POST, encoding="utf-8")
    return f


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    """A _posts directory holding one good, one failing, and one warning post."""
    posts = tmp_path / "_posts"
    posts.mkdir()
    (posts / "a-good.md").write_text(CREATIONAL_POST, encoding="utf-8")
    (posts / "b-bad.md").write_text("---\nlayout: post\n---\nNo title.\n", encoding="utf-8")
    (posts / "c-unclosed.md").write_text(UNCLOSED_POST, encoding="utf-8")
    (posts / "notes.txt").write_text("not a post", encoding="utf-8")
    return posts


@pytest.fixture(name="minimal_text")
def minimal_text_fixture():
    return MINIMAL_POST


@pytest.fixture(name="unclosed_text")
def unclosed_text_fixture():
    return UNCLOSED_POST
