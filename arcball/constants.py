"""Game constants and configuration."""

import math

import pygame

# Window settings
FIELD_WIDTH = 480
FIELD_HEIGHT = 640
HUD_HEIGHT = 56
WINDOW_WIDTH = FIELD_WIDTH
WINDOW_HEIGHT = FIELD_HEIGHT + HUD_HEIGHT
FPS = 60

# Colors
COLOR_BACKGROUND = (0, 0, 0)
COLOR_FIELD = (20, 24, 32)
COLOR_GOAL = (0, 255, 0)
COLOR_ARROW = (255, 0, 0)
COLOR_BALL = (235, 235, 235)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_HIGHLIGHT = (255, 200, 60)
COLOR_HUD = (30, 30, 40)
COLOR_BUTTON = (100, 130, 180)
COLOR_BUTTON_HOVER = (120, 150, 200)
COLOR_BUTTON_TEXT = (255, 255, 255)

# Sprites
BALL_SIZE = 15
ARROW_LENGTH = 32
BALL_IMAGE = "assets/ball.png"

# Goal zone along the top edge
GOAL_WIDTH = 85
GOAL_HEIGHT = 5
GOAL_X = (FIELD_WIDTH - GOAL_WIDTH) / 2
GOAL_Y = 0

# Game mechanics (per tick at the reference frame rate)
ARROW_SPEED = 0.007
BALL_SPEED = 3
ARROW_START_ANGLE = math.pi / 6
ARROW_MIN_ANGLE = math.pi / 9
ARROW_MAX_ANGLE = (16 * math.pi) / 18
WIN_SCORE = 5

# Controls
FIRE_KEY = pygame.K_UP
RESET_KEY = pygame.K_r
PAUSE_KEY = pygame.K_p
QUIT_KEY = pygame.K_ESCAPE

# UI Layout
HUD_PADDING = 12
HUD_BUTTON_WIDTH = 90
HUD_BUTTON_HEIGHT = 32
SCORE_POS = (20, 30)
