"""Text reports"""

import logging
from tabulate import tabulate

from .codes import component_codes, ComponentCode, legend
from .format import format_resistance, format_voltage
from .network import PARALLEL_OPERATOR

LOGGER = logging.getLogger(__name__)

# default table format
TABLE_FORMAT = "simple"
# number of results annotated with component codes
TOP_CODES = 5

CODE_HEADERS = ["Value", "4-band", "5-band", "SMD"]


def _code_row(code):
    return [f"{code.value:.2f} Ω", code.four_band, code.five_band, code.smd]


def ranking_report(ranking, top_codes=TOP_CODES, parallel=PARALLEL_OPERATOR,
                   tablefmt=TABLE_FORMAT, show_legend=True):
    """Describe a :class:`.Ranking` as text

    Parameters
    ----------
    ranking : :class:`.Ranking`
        The query result.
    top_codes : :class:`int`, optional
        The number of results for which the codes of the component resistors are listed.
    parallel : :class:`str`, optional
        The parallel operator used in expressions.
    tablefmt : :class:`str`, optional
        The tabulate table format.
    show_legend : :class:`bool`, optional
        Append the color code reference.

    Returns
    -------
    :class:`str`
    """
    lines = [f"-- Networks within {100 * ranking.tolerance:.2f}% tolerance of "
             f"{ranking.target:.2f} Ω --"]

    if ranking.found:
        lines.append(f"   Found {ranking.total} combinations, showing top {len(ranking)} sorted "
                     "by error")
        lines.append("")

        rows = []
        for rank, result in enumerate(ranking, 1):
            plural = "s" if result.count > 1 else ""
            rows.append([f"#{rank}", result.network.label(parallel),
                         f"{result.resistance:.2f} Ω", f"{result.count} resistor{plural}",
                         f"{result.error_percent:.2f}%"])

        lines.append(tabulate(rows, ["Rank", "Network", "Resistance", "Resistors", "Error"],
                              tablefmt=tablefmt))

        if ranking.remaining > 0:
            lines.append(f"... and {ranking.remaining} more results")

        top = ranking.results[:top_codes]
        if top:
            lines.append("")
            lines.append("-- Component resistor codes --")

            for rank, result in enumerate(top, 1):
                lines.append("")
                lines.append(f"#{rank} {result.network.label(parallel)}")
                rows = [_code_row(code) for code in component_codes(result.parts)]
                lines.append(tabulate(rows, CODE_HEADERS, tablefmt=tablefmt))

                if result.count > len(result.parts):
                    lines.append(f"({result.count - len(result.parts)} resistors not listed)")
    else:
        lines.append("No network found within the specified tolerance.")

    networks = ranking.networks
    if networks is not None and getattr(networks, "is_truncated", False):
        lines.append("")
        if networks.n_truncated:
            lines.append(f"Note: {networks.n_truncated} candidate networks were dropped "
                         f"(at most {networks.max_per_size} kept per size).")
        if networks.budget_exhausted:
            lines.append("Note: the node budget was exhausted before all sizes were built.")

    if show_legend:
        lines.append("")
        lines.append("-- Color Code Reference --")
        lines.extend(legend())

    return "\n".join(lines)


def codes_table(values, tablefmt=TABLE_FORMAT):
    """Codes of each value, one row per value"""
    rows = [_code_row(ComponentCode(value)) for value in values]
    return tabulate(rows, CODE_HEADERS, tablefmt=tablefmt)


def ladder_report(spec, tablefmt=TABLE_FORMAT):
    """Describe a :class:`.LadderSpec` as text"""
    lines = [f"-- {spec.bits}-bit R-2R ladder, Vref = {format_voltage(spec.vref)} --", ""]

    bom = [["R", format_resistance(spec.r), spec.r_count, spec.r_codes.four_band,
            spec.r_codes.five_band, spec.r_codes.smd],
           ["2R", format_resistance(spec.r2), spec.r2_count, spec.r2_codes.four_band,
            spec.r2_codes.five_band, spec.r2_codes.smd]]
    lines.append(tabulate(bom, ["Part", "Value", "Qty", "4-band", "5-band", "SMD"],
                          tablefmt=tablefmt))
    lines.append(f"Total: {spec.total_resistors} resistors")
    lines.append("")
    lines.append(f"Levels: {spec.levels}")
    lines.append(f"LSB: {format_voltage(spec.lsb)}")
    lines.append(f"Maximum output: {format_voltage(spec.max_output)}")
    lines.append(f"Output impedance: {format_resistance(spec.output_impedance)}")
    lines.append("")

    rows = [[sample.text, sample.code, f"{sample.voltage:.6f}"] for sample in spec.samples]
    lines.append(tabulate(rows, ["Code", "Decimal", "Output (V)"], tablefmt=tablefmt,
                          disable_numparse=True))

    return "\n".join(lines)
