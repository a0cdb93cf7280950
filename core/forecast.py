from core.config import FORECAST_POINTS


def sample_classes(remaining, points=FORECAST_POINTS):
    """
    Class numbers to plot: every class for a short term, otherwise
    `points` evenly spaced ones ending on the last class.
    """
    if remaining <= points:
        return list(range(1, remaining + 1))
    return [remaining * j // points for j in range(1, points + 1)]


def forecast(attended, conducted, remaining, planned=None, points=FORECAST_POINTS):
    """
    Attendance after each of the remaining classes, for three ways
    of spending the rest of the term. The plan attends its classes
    first and skips the rest.
    """
    data = {
        "class": sample_classes(remaining, points),
        "attend_all": [],
        "bunk_all": []
    }
    if planned is not None:
        data["plan"] = []

    for k in data["class"]:
        total = conducted + k

        data["attend_all"].append(round((attended + k) / total * 100, 2))
        data["bunk_all"].append(round(attended / total * 100, 2))

        if planned is not None:
            data["plan"].append(round((attended + min(k, planned)) / total * 100, 2))

    return data
