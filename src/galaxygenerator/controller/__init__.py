"""
The CONTROLLER layer owns the live galaxy and the animation clock.
Like the model, it does NOT import PySide6 or PyVista; the renderer is reached
through the `SceneHost` protocol.
"""
