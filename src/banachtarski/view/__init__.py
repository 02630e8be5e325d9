"""
The VIEW layer contains the Qt windows and widgets.
It reads from AnimationState and never builds or classifies trees itself.
"""
