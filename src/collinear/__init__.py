from collinear.core.point import Point
from collinear.core.fraction import ExactFraction
from collinear.core.line import Line, slope
from collinear.modules.grouping import collinear_group, lines_containing
from collinear.modules.maximizer import (
    collinear_groups,
    largest_collinear_group,
    max_collinear_points,
)
