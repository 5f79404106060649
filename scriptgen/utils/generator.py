import logging
from numbers import Number
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from scriptgen.utils import actions
from scriptgen.utils.block import Block, Line
from scriptgen.utils.options import GeneratorOptions
from scriptgen.utils.renderer import ProgramRenderer

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Optional[Block]]


class CodeGenerator:
    """Compiles recorded browser events into a Puppeteer script.

    Each event is dispatched on its ``action`` to a handler that returns at
    most one ``Block``. Blocks keep event order, except for the navigation
    promise declaration which always goes first. Frame declarations and blank
    lines are added by post-processing passes before the lines are rendered.
    """

    def __init__(
        self, options: Union[GeneratorOptions, Mapping[str, Any], None] = None
    ):
        self.options = GeneratorOptions.coerce(options)
        self.renderer = ProgramRenderer(self.options)
        self._reset()

        self._action_handlers: Dict[str, Handler] = {
            actions.SUBMIT: self._handle_submit,
            actions.KEYDOWN: self._handle_keydown,
            actions.CLICK: self._handle_click,
            actions.CHANGE: self._handle_change,
            actions.GOTO: self._handle_goto,
            actions.VIEWPORT: self._handle_viewport,
            actions.NAVIGATION: self._handle_wait_for_navigation,
        }

    def _reset(self) -> None:
        self._blocks: List[Block] = []
        self._frame = actions.TOP_LEVEL_FRAME
        self._frame_id = 0
        # frame id -> frame url, in order of first appearance
        self._all_frames: Dict[Any, str] = {}
        self._has_navigation = False

    def generate(self, events: Optional[Sequence[Mapping[str, Any]]]) -> str:
        return self.renderer.render(self.generate_lines(events))

    def generate_lines(self, events: Optional[Sequence[Mapping[str, Any]]]) -> List[Line]:
        """Runs the compiler and returns the final body lines, unrendered."""
        blocks = self.generate_blocks(events)
        return [line for block in blocks for line in block.get_lines()]

    def generate_blocks(self, events: Optional[Sequence[Mapping[str, Any]]]) -> List[Block]:
        self._reset()
        events = events or []
        logger.debug(f"Generating code for {len(events)} events")

        for index, event in enumerate(events):
            if not isinstance(event, Mapping):
                logger.debug(f"Skipping event {index}: not a mapping ({type(event).__name__})")
                continue

            # we need to keep a handle on what frames events originate from
            self._set_frames(event.get("frameId"), event.get("frameUrl"))

            action = event.get("action")
            handler = self._action_handlers.get(action)
            block = handler(event) if handler else None
            if block is None:
                logger.debug(f"No code generated for event {index} (action: {action})")
                continue

            self._blocks.append(self._handle_comments(block, event.get("comments")))

        if self._has_navigation and self.options.wait_for_navigation:
            logger.debug("Adding navigationPromise declaration")
            self._blocks.insert(
                0,
                Block(
                    lines=[
                        Line(
                            "const navigationPromise = page.waitForNavigation()",
                            type=actions.NAVIGATION_PROMISE,
                        )
                    ]
                ),
            )

        self._post_process()
        blocks = self._blocks
        self._reset()
        return blocks

    def _set_frames(self, frame_id: Any, frame_url: Optional[str]) -> None:
        frame_id = _normalize_frame_id(frame_id)
        if _is_child_frame(frame_id):
            self._frame_id = frame_id
            self._frame = f"frame_{frame_id}"
            if frame_url and frame_id not in self._all_frames:
                self._all_frames[frame_id] = frame_url
        else:
            self._frame_id = 0
            self._frame = actions.TOP_LEVEL_FRAME

    def _new_block(self, *lines: Line) -> Block:
        return Block(self._frame_id, lines)

    def _handle_comments(self, block: Block, comments: Optional[str]) -> Block:
        if comments:
            block.add_line_to_top(Line(f"/** {comments} */"))
        return block

    # --- Event handlers ---
    def _handle_submit(self, event: Mapping[str, Any]) -> Optional[Block]:
        selector = event.get("selector")
        if event.get("tagName") != actions.FORM_TAG or not selector:
            return None
        return self._new_block(
            Line(
                f"await {self._frame}.$eval('{selector}', form => form.submit())",
                type=actions.SUBMIT,
            )
        )

    def _handle_keydown(self, event: Mapping[str, Any]) -> Optional[Block]:
        selector = event.get("selector")
        # Only Tab moves focus to a new field, other keys are not replayed
        if event.get("keyCode") != actions.TAB_KEY_CODE or not selector:
            return None
        return self._new_block(
            Line(
                f"await {self._frame}.type('{selector}', '{_text(event.get('value'))}')",
                type=actions.KEYDOWN,
            )
        )

    def _handle_click(self, event: Mapping[str, Any]) -> Optional[Block]:
        selector = event.get("selector")
        if not selector:
            return None
        block = self._new_block()
        if self.options.wait_for_selector_on_click:
            block.add_line(
                Line(f"await {self._frame}.waitForSelector('{selector}')", type=actions.CLICK)
            )
        block.add_line(Line(f"await {self._frame}.click('{selector}')", type=actions.CLICK))
        if self.options.custom_line_after_click:
            block.add_line(Line(self.options.custom_line_after_click, type=actions.CLICK))
        return block

    def _handle_change(self, event: Mapping[str, Any]) -> Optional[Block]:
        selector = event.get("selector")
        if not selector:
            return None
        value = _text(event.get("value"))
        if event.get("tagName") == actions.SELECT_TAG:
            statement = f"await {self._frame}.select('{selector}', '{value}')"
        else:
            statement = f"await {self._frame}.type('{selector}', '{value}')"
        return self._new_block(Line(statement, type=actions.CHANGE))

    def _handle_goto(self, event: Mapping[str, Any]) -> Optional[Block]:
        href = event.get("href")
        if not href:
            return None
        return self._new_block(Line(f"await {self._frame}.goto('{href}')", type=actions.GOTO))

    def _handle_viewport(self, event: Mapping[str, Any]) -> Optional[Block]:
        value = event.get("value")
        if not isinstance(value, Mapping):
            return None
        width, height = value.get("width"), value.get("height")
        if not all(_is_number(dimension) for dimension in (width, height)):
            return None
        return self._new_block(
            Line(
                f"await {self._frame}.setViewport({{ width: {width}, height: {height} }})",
                type=actions.VIEWPORT,
            )
        )

    def _handle_wait_for_navigation(self, event: Mapping[str, Any]) -> Optional[Block]:
        self._has_navigation = True
        if not self.options.wait_for_navigation:
            return None
        return self._new_block(Line("await navigationPromise", type=actions.NAVIGATION))

    # --- Post processing ---
    def _post_process(self) -> None:
        # when events are recorded from different frames, declare each frame
        # right before the first code that uses it
        if self._all_frames:
            self._blocks = self._post_process_set_frames(self._blocks)

        if self.options.blank_lines_between_blocks and self._blocks:
            self._blocks = self._post_process_add_blank_lines(self._blocks)

    def _post_process_set_frames(self, blocks: List[Block]) -> List[Block]:
        pending = dict(self._all_frames)
        frames_fetched = False
        for block in blocks:
            frame_id = next(
                (frame_id for frame_id in block.frame_ids() if frame_id and frame_id in pending),
                None,
            )
            if frame_id is None:
                continue

            frame_url = pending.pop(frame_id)
            fetch = "frames = await page.frames()" if frames_fetched else "let frames = await page.frames()"
            frames_fetched = True
            block.add_line_to_top(
                Line(
                    f"const frame_{frame_id} = frames.find(f => f.url() === '{frame_url}')",
                    type=actions.FRAME_SET,
                )
            )
            block.add_line_to_top(Line(fetch, type=actions.FRAME_SET))
        return blocks

    @staticmethod
    def _post_process_add_blank_lines(blocks: List[Block]) -> List[Block]:
        spaced = [Block.blank()]
        for block in blocks:
            spaced.append(block)
            spaced.append(Block.blank())
        return spaced


def _normalize_frame_id(frame_id: Any) -> Any:
    # the capture agent may send ids as numeric strings
    if isinstance(frame_id, str) and frame_id.strip().isdigit():
        return int(frame_id)
    return frame_id


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _is_child_frame(frame_id: Any) -> bool:
    if isinstance(frame_id, bool) or not isinstance(frame_id, (int, str)):
        return False
    return bool(frame_id) and frame_id != 0


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def compile_events(
    events: Optional[Sequence[Mapping[str, Any]]],
    options: Union[GeneratorOptions, Mapping[str, Any], None] = None,
) -> str:
    """Compiles an ordered list of event records into script text."""
    return CodeGenerator(options).generate(events)
