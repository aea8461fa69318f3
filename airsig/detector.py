"""Classification of sensor readings against the signature catalogue."""

from __future__ import annotations

from dataclasses import dataclass

from airsig.signatures import get_signatures

_NO_PRIORITY = 99


@dataclass
class DetectionResult:
    """Outcome of classifying one reading."""

    signature: str = ""
    is_threat: bool = False
    is_spike: bool = False


def _in_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def _fallback_signature(iaq: float, voc: float, co2: float, in_spike: bool) -> str:
    if iaq <= 50 and voc <= 0.6 and co2 <= 600:
        if iaq <= 25 and voc <= 0.3:
            return f"Pristine_Air_IAQ{iaq:.0f}_VOC{voc:.2f}ppm"
        return f"Clean_Air_IAQ{iaq:.0f}_VOC{voc:.2f}ppm"
    if iaq <= 100 and voc <= 1.0 and co2 <= 800:
        return f"Moderate_Air_IAQ{iaq:.0f}_VOC{voc:.2f}ppm"
    if voc > 5.0 and in_spike:
        return f"Suspicious_VOC_Spike_{voc:.1f}ppm"
    if voc > 2.0:
        return f"High_VOC_{voc:.1f}ppm"
    if co2 > 1000:
        return f"CO2_Hazard_{co2:.0f}ppm"
    if iaq > 250:
        return f"Severe_Pollution_IAQ{iaq:.0f}"
    if iaq > 150:
        return f"Heavy_Pollution_IAQ{iaq:.0f}_VOC{voc:.1f}ppm"
    if iaq > 100:
        return f"Unhealthy_Air_IAQ{iaq:.0f}_VOC{voc:.1f}ppm"
    return f"Unknown_Source_IAQ{iaq:.0f}_VOC{voc:.2f}ppm"


class PollutionDetector:
    """Matches readings against known pollution signatures."""

    def __init__(self, iaq_threshold: float = 10.0, voc_threshold: float = 0.05,
                 co2_threshold: float = 50.0, pm25_threshold: float = 25.0) -> None:
        self.iaq_threshold = iaq_threshold
        self.voc_threshold = voc_threshold
        self.co2_threshold = co2_threshold
        self.pm25_threshold = pm25_threshold

    def detect(self, iaq: float, voc: float, co2: float, temp: float,
               humidity: float, in_spike: bool) -> DetectionResult:
        """Classify a reading; ties at the best priority are joined with '+'."""
        result = DetectionResult(is_spike=in_spike)

        if not in_spike and iaq < 50 and voc < 0.5 and co2 < 800:
            result.signature = "Clean_Air"
            return result

        highest_priority = _NO_PRIORITY
        names: list[str] = []
        humidity_match = 20 <= humidity <= 60

        for pattern in get_signatures():
            matches = sum((
                _in_range(iaq, pattern.min_iaq, pattern.max_iaq),
                _in_range(voc, pattern.min_voc, pattern.max_voc),
                _in_range(co2, pattern.min_co2, pattern.max_co2),
                _in_range(temp, pattern.min_temp, pattern.max_temp),
            ))
            if pattern.is_threat:
                if not in_spike:
                    continue
                matches += humidity_match
            if matches < 3:
                continue
            if pattern.priority < highest_priority:
                highest_priority = pattern.priority
                names = [pattern.name]
                result.is_threat = pattern.is_threat
            elif pattern.priority == highest_priority:
                names.append(pattern.name)

        if names:
            result.signature = "+".join(names)
        else:
            result.signature = _fallback_signature(iaq, voc, co2, in_spike)

        if highest_priority <= 2:
            result.is_threat = True
        return result

    def is_spike(self, current_value: float, baseline_value: float, threshold: float) -> bool:
        """Return True when the value exceeds the baseline by more than threshold."""
        return (current_value - baseline_value) > threshold

    def set_thresholds(self, iaq: float, voc: float, co2: float, pm25: float) -> None:
        """Replace all spike thresholds."""
        self.iaq_threshold = iaq
        self.voc_threshold = voc
        self.co2_threshold = co2
        self.pm25_threshold = pm25