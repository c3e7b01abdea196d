#!/usr/bin/env python3
"""Stroke Practice Demo with Visual Feedback.

Draw the strokes of a character in order with the mouse. Each finished
stroke is validated against the expected stroke type and the feedback is
shown on screen; live feedback is refreshed while drawing.
"""

import json
from typing import Dict, List, Optional, Tuple

import pygame

from stroke_recognition import (
    CurvatureMode,
    PointThrottle,
    PracticeSession,
    ReferenceSequence,
    StrokeEngine,
    ValidationDebouncer,
    ValidationResult,
)
from stroke_recognition.strokes.errors import InsufficientPointsError

# Small bundled stroke-order table for the demo
CHARACTERS: Dict[str, List[str]] = {
    "一": ["horizontal"],
    "二": ["horizontal", "horizontal"],
    "三": ["horizontal", "horizontal", "horizontal"],
    "十": ["horizontal", "vertical"],
    "人": ["diagonal", "diagonal"],
    "了": ["horizontal", "curve"],
}

CANVAS = pygame.Rect(100, 150, 600, 600)


class StrokePracticeDemo:
    """Interactive demo for stroke order practice."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1200, 800))
        pygame.display.set_caption("Stroke Practice Demo")

        # A full-width stroke is about 80% of the canvas
        self.engine = StrokeEngine(unit_length=CANVAS.width * 0.8)
        self.throttle = PointThrottle()
        self.debouncer = ValidationDebouncer()

        self.characters = list(CHARACTERS)
        self.char_index = 0
        self.mode = CurvatureMode.BASIC
        self.session = self._new_session()

        self.current_path: List[Dict] = []
        self.finished_paths: List[List[Tuple[float, float]]] = []
        self.is_drawing = False
        self.live_result: Optional[ValidationResult] = None
        self.last_result: Optional[ValidationResult] = None
        self.final_score: Optional[float] = None

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.RED = (220, 0, 0)
        self.GREEN = (0, 160, 0)
        self.BLUE = (0, 0, 255)
        self.GRAY = (128, 128, 128)

        # Fonts
        self.font = pygame.font.Font(None, 40)
        self.small_font = pygame.font.Font(None, 28)

    def _new_session(self) -> PracticeSession:
        character = self.characters[self.char_index]
        reference = ReferenceSequence.from_types(character, CHARACTERS[character])
        return PracticeSession(reference, self.engine, self.mode)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1 and CANVAS.collidepoint(event.pos):
                        self.start_drawing(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing:
                        self.continue_drawing(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1 and self.is_drawing:
                        self.finish_drawing()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_n:
                        self.next_character()
                    elif event.key == pygame.K_c:
                        self.clear()
                    elif event.key == pygame.K_u:
                        self.undo()
                    elif event.key == pygame.K_q:
                        self.toggle_mode()
                    elif event.key == pygame.K_s:
                        self.save_attempt()

            self.update_live_feedback()
            self.draw()
            clock.tick(60)

    def start_drawing(self, pos: Tuple[int, int]) -> None:
        """Start a new stroke."""
        self.current_path = []
        self.is_drawing = True
        self.throttle.reset()
        self.add_point(pos)

    def continue_drawing(self, pos: Tuple[int, int]) -> None:
        """Add a point while drawing."""
        self.add_point(pos)

    def add_point(self, pos: Tuple[int, int]) -> None:
        """Add a point to the current stroke if the throttle lets it through."""
        x, y = pos
        point = {"x": float(x), "y": float(y), "t": float(pygame.time.get_ticks())}
        if self.throttle.accept(point):
            self.current_path.append(point)
            self.debouncer.notify(point["t"])

    def update_live_feedback(self) -> None:
        """Re-validate the stroke in progress once input has settled."""
        if not self.is_drawing or not self.debouncer.should_run(pygame.time.get_ticks()):
            return
        expected = self.session.reference.expected_at(self.session.current_index)
        try:
            _, self.live_result = self.engine.evaluate_live(self.current_path, expected)
        except InsufficientPointsError:
            self.live_result = None

    def finish_drawing(self) -> None:
        """Finish the stroke and validate it."""
        self.is_drawing = False
        self.debouncer.cancel()
        self.live_result = None

        result = self.session.submit(self.current_path)
        if result is not None:
            self.finished_paths.append([(p["x"], p["y"]) for p in self.current_path])
            self.last_result = result
            if self.session.is_complete:
                self.final_score = self.session.score()
        self.current_path = []

    def next_character(self) -> None:
        """Move on to the next character."""
        self.char_index = (self.char_index + 1) % len(self.characters)
        self.session = self._new_session()
        self.clear()

    def clear(self) -> None:
        """Start the current character over."""
        self.session.reset()
        self.current_path = []
        self.finished_paths = []
        self.last_result = None
        self.final_score = None

    def undo(self) -> None:
        """Remove the last stroke."""
        if self.session.undo() is not None:
            self.finished_paths.pop()
            self.last_result = self.session.results[-1] if self.session.results else None
            self.final_score = None

    def toggle_mode(self) -> None:
        """Switch between live practice and scored (quiz) analysis."""
        if self.mode == CurvatureMode.BASIC:
            self.mode = CurvatureMode.SEGMENTED
        else:
            self.mode = CurvatureMode.BASIC
        self.session = self._new_session()
        self.clear()

    def save_attempt(self) -> None:
        """Save the attempt in the format the stroke inspector reads."""
        if not self.session.strokes:
            return
        data = {
            "character": self.session.reference.character,
            "expected": [t.value if t else None for t in self.session.reference.types],
            "unit_length": self.engine.unit_length,
            "strokes": [[{"x": x, "y": y} for x, y in path] for path in self.finished_paths],
        }
        with open("saved_attempt.json", "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _blit_lines(self, lines: List[str], x: int, y: int, color) -> None:
        for line in lines:
            self.screen.blit(self.small_font.render(line, True, color), (x, y))
            y += 28

    def draw(self) -> None:
        """Render the UI, the strokes and the feedback."""
        self.screen.fill(self.WHITE)
        pygame.draw.rect(self.screen, self.GRAY, CANVAS, 3)

        reference = self.session.reference
        mode_label = "scored" if self.mode == CurvatureMode.SEGMENTED else "live"
        header = (f"Character {reference.character}  |  stroke "
                  f"{min(self.session.current_index + 1, len(reference))}/{len(reference)}  |  {mode_label}")
        self.screen.blit(self.font.render(header, True, self.BLACK), (100, 40))
        self._blit_lines(
            ["N: next character   C: clear   U: undo   Q: live/scored   S: save"],
            100, 90, self.GRAY
        )

        for path in self.finished_paths:
            if len(path) > 1:
                pygame.draw.lines(self.screen, self.BLACK, False, path, 6)
        if len(self.current_path) > 1:
            pts = [(p["x"], p["y"]) for p in self.current_path]
            pygame.draw.lines(self.screen, self.BLUE, False, pts, 6)

        expected = reference.expected_at(self.session.current_index)
        if expected is not None and not self.session.is_complete:
            self._blit_lines([f"Next: {expected.type.value} stroke"], 760, 160, self.BLACK)

        if self.live_result is not None:
            self._blit_lines([f"Live: {self.live_result.confidence:.0%}"], 760, 200, self.BLUE)

        if self.last_result is not None:
            color = self.GREEN if self.last_result.is_correct else self.RED
            self._blit_lines([self.last_result.message], 760, 260, color)
            self._blit_lines(self.last_result.suggestions, 760, 300, self.BLACK)

        if self.final_score is not None:
            self.screen.blit(
                self.font.render(f"Order score: {self.final_score:.2f}", True, self.GREEN),
                (760, 500)
            )
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = StrokePracticeDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
