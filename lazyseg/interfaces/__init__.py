from .algebra_interface import Algebra, T_V, T_D
