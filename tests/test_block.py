from scriptgen.utils.block import Block, Line


def test_lines_take_the_block_frame_id():
    block = Block(4, [Line("await frame_4.click('#a')", type="click")])
    block.add_line(Line("await frame_4.click('#b')", type="click"))

    assert block.frame_ids() == [4, 4]


def test_add_line_to_top_keeps_head_to_tail_order():
    block = Block(lines=[Line("second")])
    block.add_line_to_top(Line("first"))
    block.add_line(Line("third"))

    assert [line.value for line in block.get_lines()] == ["first", "second", "third"]


def test_get_lines_returns_a_copy():
    block = Block(lines=[Line("only")])
    block.get_lines().append(Line("extra"))

    assert len(block) == 1


def test_blank_block():
    block = Block.blank()

    assert block.get_lines() == [Line("", type=None, frame_id=0)]


def test_empty_block_is_falsy():
    assert not Block(2)
    assert Block(2, [Line("x")])
