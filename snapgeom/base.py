"""
snapgeom/base.py
----------------
Abstract Base Classes for scene entities.
An entity declares the roles it plays by inheriting from one or both.
"""
from abc import ABC, abstractmethod


class Drawable(ABC):
    ''' Anything the scene paints once per frame. '''

    @abstractmethod
    def draw(self, sink):
        ''' Emits drawing intents to the given DrawingSink. '''
        pass


class Interactive(ABC):
    ''' Anything the InputCoordinator dispatches pointer events to. '''

    @abstractmethod
    def drag(self, cursor):
        """ Pointer moved with the primary button down. cursor is a (2,) array. """
        pass

    @abstractmethod
    def select(self, cursor):
        """ Primary button pressed at cursor. """
        pass

    @abstractmethod
    def unselect(self):
        """ Primary button released. """
        pass
