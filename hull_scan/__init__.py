from hull_scan.orientation import Orientation, Point, clockwise, orientation, turn_test
from hull_scan.graham_scan import build_hull, closed_graham_scan, is_convex, open_graham_scan, update_hull
