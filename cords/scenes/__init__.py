"""
Scenes - intro, countdown and the composer that switches between them.
"""

from cords.scenes.base import Scene, SceneId
from cords.scenes.intro import IntroScene, draw_logo
from cords.scenes.countdown import CountdownScene
from cords.scenes.composer import SceneComposer

__all__ = [
    'Scene', 'SceneId',
    'IntroScene', 'draw_logo',
    'CountdownScene',
    'SceneComposer',
]
