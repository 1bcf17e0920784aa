"""Console formatting of balancing results."""

from typing import List

from src.team_balancer.balancer import BalanceResult

_RULE = "-" * 78


def format_assignments(result: BalanceResult) -> List[str]:
    """Lines for the per-participant assignment listing, in ranked order."""
    team_of = {a.participant_id: a.team_id for a in result.assignments}

    lines = [
        "=== PLAYER ASSIGNMENTS ===",
        f"player_id -> new_team ({result.metric.header_label}) "
        "[events_participated, total_points]",
        _RULE,
    ]
    for player in result.ranked:
        lines.append(
            f"{player.participant_id} -> Team {team_of[player.participant_id]} "
            f"({result.score_of(player):.2f}) "
            f"[{player.events_participated}, {player.points_earned}]"
        )
    return lines


def format_summaries(result: BalanceResult) -> List[str]:
    """Lines for the per-team summary block."""
    lines = ["=== TEAM SUMMARY ==="]
    for summary in result.summaries:
        lines.extend([
            "",
            f"Team {summary.team_id}:",
            f"  Size: {summary.size} players",
            "  " + result.metric.average_label.format(value=summary.avg_score),
            f"  Performance Range: {summary.performance_range} (min-max)",
            f"  Total points: {summary.total_points}",
            f"  Players: {', '.join(str(pid) for pid in summary.players)}",
            f"  Justification: {result.metric.justification}",
        ])
    return lines


def format_results(result: BalanceResult) -> str:
    """Render a full console report for *result*."""
    lines = format_assignments(result)
    lines.append("")
    lines.extend(format_summaries(result))
    lines.extend([
        "",
        "=== BALANCE VERIFICATION ===",
        "Maximum size difference between teams: "
        f"{result.size_difference()} players",
    ])

    if result.auxiliary_index.missing:
        lines.extend([
            "",
            f"Note: no {result.metric.auxiliary_dataset} data was supplied; "
            "all scores are 0 and teams follow player_id order.",
        ])

    return "\n".join(lines)
