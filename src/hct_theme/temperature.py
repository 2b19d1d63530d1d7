# temperature.py – warm/cool ordering of hues for complements and analogous colors
#   raw temperature follows Ou, Woodcock & Wright (2004) on L*a*b* hue/chroma

from __future__ import annotations

import math
from functools import cached_property

from .color_utils import lab_from_argb
from .hct import Hct
from .math_utils import round_half_up, sanitize_degrees, sanitize_degrees_int


def raw_temperature(color: Hct) -> float:
    """Warmth of a color: roughly -0.5 (cool blue) … 2.0 (hot orange)."""
    lab = lab_from_argb(color.argb)
    hue = sanitize_degrees(math.degrees(math.atan2(lab.b, lab.a)))
    chroma = math.hypot(lab.a, lab.b)
    return -0.5 + 0.02 * chroma**1.07 * math.cos(math.radians(sanitize_degrees(hue - 50.0)))


def is_between(angle: float, a: float, b: float) -> bool:
    """True if `angle` lies on the arc from `a` to `b` (degrees, inclusive)."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b


class TemperatureCache:
    """Temperature relations of one input color against its hue circle."""

    def __init__(self, input_color: Hct) -> None:
        self.input = input_color

    # ---- precomputed ----

    @cached_property
    def hcts_by_hue(self) -> list[Hct]:
        """Input chroma and tone at every integer hue 0..360."""
        return [Hct.create(float(hue), self.input.chroma, self.input.tone) for hue in range(361)]

    @cached_property
    def temps_by_hct(self) -> dict[Hct, float]:
        return {hct: raw_temperature(hct) for hct in [*self.hcts_by_hue, self.input]}

    @cached_property
    def hcts_by_temp(self) -> list[Hct]:
        temps = self.temps_by_hct
        return sorted([*self.hcts_by_hue, self.input], key=lambda hct: temps[hct])

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    # ---- queries ----

    def relative_temperature(self, hct: Hct) -> float:
        """0.0 for the coldest hue, 1.0 for the warmest; 0.5 if all are equal."""
        temps = self.temps_by_hct
        coldest_temp = temps[self.coldest]
        temp_range = temps[self.warmest] - coldest_temp
        if temp_range == 0.0:
            return 0.5
        return (temps[hct] - coldest_temp) / temp_range

    @cached_property
    def complement(self) -> Hct:
        """The color on the opposite side of the temperature scale."""
        temps = self.temps_by_hct
        coldest_hue = self.coldest.hue
        coldest_temp = temps[self.coldest]
        warmest_hue = self.warmest.hue
        temp_range = temps[self.warmest] - coldest_temp

        start_hue_is_coldest_to_warmest = is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_up(self.input.hue)]
        if temp_range == 0.0:
            # achromatic: every hue has the same temperature
            return answer

        complement_relative_temp = 1.0 - self.relative_temperature(self.input)
        for hue_addend in range(361):
            hue = sanitize_degrees(start_hue + hue_addend)
            if not is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self.hcts_by_hue[round_half_up(hue)]
            relative_temp = (temps[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        return answer

    def analogous_colors(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """
        `count` colors spaced evenly in temperature around the input, which is
        placed in the middle of the result (count // 2 on the cool side when odd).

        divisions: how many temperature steps split the full hue circle.
        """
        start_hue = round_half_up(self.input.hue)
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + i)]
            temp = self.relative_temperature(hct)
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + hue_addend)]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # a hue that spans several steps fills each of them; black and white
            # have no analogues and end up repeated
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1
            last_temp = temp
            hue_addend += 1

            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]

        ccw_count = math.floor((count - 1.0) / 2.0)
        for i in range(1, ccw_count + 1):
            answers.insert(0, all_colors[-i % len(all_colors)])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(all_colors[i % len(all_colors)])

        return answers


__all__ = ["TemperatureCache", "is_between", "raw_temperature"]
