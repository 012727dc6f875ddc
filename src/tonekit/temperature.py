"""Color temperature helpers: complementary and analogous colors.

Warm/cool is the basis of analogous and complementary colors in color theory
(Ou, Woodcock and Wright; Albers, Interaction of Color). ``TemperatureCache``
lazily builds the 361 same-chroma/same-tone colors around the input hue and
ranks them by temperature.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from .hct import Hct
from .utils.color_utils import lab_from_argb
from .utils.math_utils import sanitize_degrees_double, sanitize_degrees_int

__all__ = ["TemperatureCache"]


class TemperatureCache:
    """Temperature data for one input color, computed on first use.

    Every color produced keeps the input's tone and chroma, except where a
    hue cannot reach that chroma at that tone.
    """

    def __init__(self, input_hct: Hct) -> None:
        self.input = input_hct
        self._complement: Optional[Hct] = None
        self._hcts_by_temp: Optional[List[Hct]] = None
        self._hcts_by_hue: Optional[List[Hct]] = None
        self._temps_by_hct: Optional[Dict[Hct, float]] = None

    @property
    def complement(self) -> Hct:
        """The color as cool (warm) as the input is warm (cool)."""
        if self._complement is not None:
            return self._complement

        coldest = self._coldest()
        warmest = self._warmest()
        temps = self._get_temps_by_hct()
        by_hue = self._get_hcts_by_hue()
        coldest_hue = coldest.hue
        coldest_temp = temps[coldest]
        warmest_hue = warmest.hue
        warmest_temp = temps[warmest]
        temp_range = warmest_temp - coldest_temp
        start_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_is_coldest_to_warmest else warmest_hue
        smallest_error = 1000.0
        answer = by_hue[int(round(self.input.hue))]

        complement_relative_temp = 1.0 - self.relative_temperature(self.input)
        # Closest color on the other side to the inverse percentile of the input.
        for hue_addend in range(0, 361):
            hue = sanitize_degrees_double(start_hue + hue_addend)
            if not _is_between(hue, start_hue, end_hue):
                continue
            possible_answer = by_hue[int(round(hue))]
            if temp_range == 0.0:
                relative_temp = 0.5
            else:
                relative_temp = (temps[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        self._complement = answer
        return answer

    def analogous_colors(self, count: int = 5, divisions: int = 12) -> List[Hct]:
        """Colors adjacent in hue and equidistant in temperature.

        Parameters
        ----------
        count : int
            Number of colors to return, the input included.
        divisions : int
            Number of sections on the color wheel. Colors repeat when
            ``divisions < count``.
        """
        if count <= 0 or divisions <= 0:
            raise ValueError("count and divisions must be positive")
        by_hue = self._get_hcts_by_hue()
        start_hue = int(round(self.input.hue))
        start_hct = by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors: List[Hct] = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            temp = self.relative_temperature(by_hue[hue])
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / float(divisions)
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = by_hue[hue]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired
            index_addend = 1
            # White and black have no analogues; keep appending until the
            # temperature budget for this index runs out.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired
                index_addend += 1
            last_temp = temp
            hue_addend += 1

            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers: List[Hct] = [self.input]

        ccw_count = (count - 1) // 2
        for i in range(1, ccw_count + 1):
            answers.insert(0, all_colors[(-i) % len(all_colors)])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(all_colors[i % len(all_colors)])

        return answers

    def relative_temperature(self, hct: Hct) -> float:
        """Temperature on a 0..1 scale among colors with the same chroma and tone."""
        temps = self._get_temps_by_hct()
        coldest_temp = temps[self._coldest()]
        temp_range = temps[self._warmest()] - coldest_temp
        # At T100 only white exists, so there is no spread to measure.
        if temp_range == 0.0:
            return 0.5
        return (temps[hct] - coldest_temp) / temp_range

    @staticmethod
    def raw_temperature(color: Hct) -> float:
        """Cool/warm factor: negative is cool, positive is warm (about -9.66 .. 8.61)."""
        _, a, b = lab_from_argb(color.to_int())
        hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
        chroma = math.hypot(a, b)
        return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(
            math.radians(sanitize_degrees_double(hue - 50.0))
        )

    # --- Lazy tables ------------------------------------------------------
    def _coldest(self) -> Hct:
        return self._get_hcts_by_temp()[0]

    def _warmest(self) -> Hct:
        return self._get_hcts_by_temp()[-1]

    def _get_hcts_by_hue(self) -> List[Hct]:
        if self._hcts_by_hue is None:
            self._hcts_by_hue = [
                Hct.from_hct(float(hue), self.input.chroma, self.input.tone) for hue in range(0, 361)
            ]
        return self._hcts_by_hue

    def _get_hcts_by_temp(self) -> List[Hct]:
        if self._hcts_by_temp is None:
            temps = self._get_temps_by_hct()
            hcts = list(self._get_hcts_by_hue()) + [self.input]
            self._hcts_by_temp = sorted(hcts, key=lambda h: temps[h])
        return self._hcts_by_temp

    def _get_temps_by_hct(self) -> Dict[Hct, float]:
        if self._temps_by_hct is None:
            all_hcts = list(self._get_hcts_by_hue()) + [self.input]
            self._temps_by_hct = {hct: self.raw_temperature(hct) for hct in all_hcts}
        return self._temps_by_hct


def _is_between(angle: float, a: float, b: float) -> bool:
    """True when ``angle`` lies on the clockwise arc from ``a`` to ``b``."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b
