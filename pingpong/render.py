"""
Draw passes for the table. Everything here talks to a canvas with this interface:

    width, height
    clear(color)
    fill_rect(rect, color)
    fill_circle(x, y, radius, color)
    draw_text(text, x, y, size, color)

Text positions are the top-left corner of the rendered string.
"""
from pingpong.geometry import Rectangle
from pingpong.settings import (
    BG,
    BUTTON,
    BUTTON_TEXT,
    LARGE_FONT,
    SCORE_TEXT,
    SMALL_FONT,
    WALL,
    WHITE,
    PlayerSlot,
)

PLAYER_NAMES = {PlayerSlot.ONE: "Red Player", PlayerSlot.TWO: "Blue Player"}


def start_button_rect(width, height):
    return Rectangle(width / 2 - 60, height / 2 - 20, 120, 40)


def draw_walls(canvas, settings):
    s = settings
    canvas.fill_rect(Rectangle(0, s.court_margin_y, canvas.width, s.wall_size), WALL)
    canvas.fill_rect(
        Rectangle(0, canvas.height - s.court_margin_y - s.wall_size, canvas.width, s.wall_size),
        WALL,
    )


def draw_paddle(canvas, paddle):
    canvas.fill_rect(paddle.collision_box, paddle.render_color)


def draw_ball(canvas, ball):
    canvas.fill_circle(ball.pos_x, ball.pos_y, ball.radius, WHITE)


def draw_scoreboard(canvas, board):
    canvas.draw_text(f"{PLAYER_NAMES[PlayerSlot.ONE]} | {board.score_of(PlayerSlot.ONE)}", 8, 6, SMALL_FONT, SCORE_TEXT)
    canvas.draw_text(
        f"{board.score_of(PlayerSlot.TWO)} | {PLAYER_NAMES[PlayerSlot.TWO]}",
        canvas.width - 115, 6, SMALL_FONT, SCORE_TEXT,
    )
    canvas.draw_text(f"Round: {board.round}", canvas.width / 2 - 50, 6, SMALL_FONT, SCORE_TEXT)

    if board.winner is not None:
        canvas.draw_text(
            f"{PLAYER_NAMES[board.winner]} wins!", canvas.width / 2 - 75, 44, LARGE_FONT, WHITE
        )


def draw_start_button(canvas, rect):
    canvas.fill_rect(rect, BUTTON)
    canvas.draw_text("Start Match", rect.x + 20, rect.y + rect.height / 2 - 8, SMALL_FONT, BUTTON_TEXT)


def draw_frame(canvas, table, button_rect):
    """Full render pass: the start button only shows between matches."""
    canvas.clear(BG)
    draw_walls(canvas, table.settings)
    draw_paddle(canvas, table.left_paddle)
    draw_paddle(canvas, table.right_paddle)
    draw_ball(canvas, table.ball)
    draw_scoreboard(canvas, table.score_board)
    if not table.is_match_running:
        draw_start_button(canvas, button_rect)
