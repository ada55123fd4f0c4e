from scalargrad import Node, render, print_graph, get_graph_stats, print_graph_summary


def test_render_product():
    a = Node(2.0, "a")
    b = Node(3.0, "b")
    c = a * b
    c.label = "c"
    c.backward()

    assert render(c) == (
        "c=(6.0000, 1.0000) [*]\n"
        "  a=(2.0000, 3.0000)\n"
        "  b=(3.0000, 2.0000)"
    )


def test_render_repeats_shared_nodes():
    a = Node(1.0, "a")
    d = a + a
    d.label = "d"
    lines = render(d).splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("[+]")
    assert lines[1].strip() == lines[2].strip() == "a=(1.0000, 0.0000)"


def test_render_unary_and_scalar_labels():
    x = Node(0.0, "x")
    y = (x * 2).tanh()
    y.label = "y"
    text = render(y)
    assert text.splitlines()[0] == "y=(0.0000, 0.0000) [tanh]"
    assert "    scalar=(2.0000, 0.0000)" in text


def test_print_graph(capsys):
    a = Node(1.5, "a")
    print_graph(a)
    assert capsys.readouterr().out == "a=(1.5000, 0.0000)\n"


def test_graph_stats():
    a = Node(1.0, "a")
    b = Node(2.0, "b")
    d = a * b + a

    stats = get_graph_stats(d)
    assert stats["nodes"] == 4
    assert stats["edges"] == 4
    assert stats["max_fan_in"] == 2
    assert stats["avg_fan_in"] == 1.0
    assert stats["max_fan_out"] == 2
    assert stats["operations"] == {"NONE": 2, "MUL": 1, "ADD": 1}


def test_graph_stats_single_leaf():
    stats = get_graph_stats(Node(1.0))
    assert stats["nodes"] == 1
    assert stats["edges"] == 0
    assert stats["max_fan_out"] == 0


def test_print_graph_summary(capsys):
    a = Node(1.0)
    stats = print_graph_summary(a.exp() + a)
    out = capsys.readouterr().out
    assert "EXPRESSION GRAPH SUMMARY" in out
    assert "Total nodes:" in out
    assert stats["operations"]["EXP"] == 1
