"""
Gameplay for a one-player Pong: the left paddle is the player, the right one
follows the ball.

Units are pixels and milliseconds: velocities are pixels/ms and `update`
takes the elapsed frame time in ms. Nothing here touches the display, so the
whole game can be stepped headless.
"""
import logging
import math
from dataclasses import dataclass, field

import pygame

logger = logging.getLogger(__name__)

PADDLE_W, PADDLE_H = 25, 100
BALL_SIZE = 25
PADDLE_MARGIN = 25
BALL_VELOCITY = (-0.25, 0.25)
PADDLE_SPEED = 1.0


def _half(n):
    # truncates toward zero, -25/2 is -12
    return int(n / 2)


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)


@dataclass
class MovingRect:
    # local_rect is relative to the origin, world_rect() moves it by position
    local_rect: pygame.Rect
    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)

    def world_rect(self):
        return pygame.Rect(
            math.floor(self.position.x) + self.local_rect.x,
            math.floor(self.position.y) + self.local_rect.y,
            self.local_rect.w, self.local_rect.h)


@dataclass
class GameState:
    paddle_1: MovingRect
    paddle_2: MovingRect
    ball: MovingRect
    screen: pygame.Rect
    score_1: int = 0
    score_2: int = 0

    def rects(self):
        return [self.paddle_1.world_rect(), self.paddle_2.world_rect(), self.ball.world_rect()]

    def score_text(self):
        return f"{self.score_1} - {self.score_2}"


def paddle_rect():
    return pygame.Rect(-_half(PADDLE_W), -_half(PADDLE_H), PADDLE_W, PADDLE_H)


def new_game(width, height):
    cx, cy = float(width // 2), float(height // 2)
    return GameState(
        paddle_1=MovingRect(paddle_rect(), Vector2(float(PADDLE_MARGIN), cy)),
        paddle_2=MovingRect(paddle_rect(), Vector2(float(width - PADDLE_MARGIN), cy)),
        ball=MovingRect(
            pygame.Rect(-_half(BALL_SIZE), -_half(BALL_SIZE), BALL_SIZE, BALL_SIZE),
            Vector2(cx, cy),
            Vector2(*BALL_VELOCITY)),
        screen=pygame.Rect(0, 0, width, height),
    )


def move_ball(ball, dt):
    ball.position.x += ball.velocity.x * dt
    ball.position.y += ball.velocity.y * dt


def bounce_off_paddles(state):
    ball = state.ball
    # sign forcing, not reflection: the ball always heads away from the paddle it touches
    if ball.world_rect().colliderect(state.paddle_1.world_rect()):
        ball.velocity.x = abs(ball.velocity.x)
    if ball.world_rect().colliderect(state.paddle_2.world_rect()):
        ball.velocity.x = -abs(ball.velocity.x)


def bounce_off_walls(state):
    ball = state.ball
    rect = ball.world_rect()
    if rect.y <= 0:
        ball.velocity.y = abs(ball.velocity.y)
    if rect.y + rect.h >= state.screen.h:
        ball.velocity.y = -abs(ball.velocity.y)


def reset_ball(state):
    # velocity is kept, the ball serves from the centre in its last direction
    state.ball.position.x = float(state.screen.w // 2)
    state.ball.position.y = float(state.screen.h // 2)


def check_score(state):
    if state.ball.position.x <= 0:
        logger.info("right scored")
        state.score_2 += 1
        reset_ball(state)
    if state.ball.position.x >= state.screen.w:
        logger.info("left scored")
        state.score_1 += 1
        reset_ball(state)


def cpu_policy(ball, paddle):
    # perfect tracking, no speed limit
    paddle.position.y = ball.position.y


def move_player(paddle, keys, dt):
    if keys[pygame.K_UP]:
        paddle.position.y -= PADDLE_SPEED * dt
    if keys[pygame.K_DOWN]:
        paddle.position.y += PADDLE_SPEED * dt


def clamp_paddle(paddle, screen):
    half = paddle.local_rect.h // 2
    paddle.position.y = max(float(half), min(paddle.position.y, float(screen.h - half)))


def update(state, dt, keys):
    # dt in ms, keys is pygame.key.get_pressed() or anything keyed by K_* constants
    move_ball(state.ball, dt)
    bounce_off_paddles(state)
    bounce_off_walls(state)
    check_score(state)

    cpu_policy(state.ball, state.paddle_2)
    move_player(state.paddle_1, keys, dt)

    clamp_paddle(state.paddle_1, state.screen)
    clamp_paddle(state.paddle_2, state.screen)
