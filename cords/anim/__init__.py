"""
Animations - cord field, text reveal, countdown and progress indicator.
"""

from cords.anim.particles import Cord, CordField, draw_grid
from cords.anim.reveal import TextReveal, RevealLayer
from cords.anim.countdown import Countdown
from cords.anim.progress import ProgressIndicator

__all__ = [
    'Cord', 'CordField', 'draw_grid',
    'TextReveal', 'RevealLayer',
    'Countdown',
    'ProgressIndicator',
]
