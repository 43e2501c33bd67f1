import math

def is_coordinate(value) -> bool:
    # bool is an int subclass; JSON true/false must not pass as a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False

def moved(prev_lat: float, prev_lng: float, lat: float, lng: float, threshold_deg: float) -> bool:
    return abs(lat - prev_lat) > threshold_deg or abs(lng - prev_lng) > threshold_deg
