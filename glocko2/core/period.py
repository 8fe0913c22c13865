"""rating a whole roster for one rating period"""
import dataclasses
from typing import List, Mapping, Sequence
from glocko2.core.scaling import scale, unscale
from glocko2.core.types import MatchResult, Opponent, Player
from glocko2.core.updater import phi_star, rate


def rate_player(player: Player, opponents: Sequence[Opponent], players: Sequence[Player], tau: float, **kwargs) -> Player:
    """rate one player against opponents given as indices into players"""
    results = [MatchResult(players[o.idx].r, players[o.idx].rd, o.sj) for o in opponents]
    r, rd, sigma = rate(player, results, tau, **kwargs)
    return dataclasses.replace(player, r=r, rd=rd, sigma=sigma)


def rate_roster(
    players: Sequence[Player],
    schedule: Mapping[int, Sequence[Opponent]],
    tau: float,
    **kwargs,
) -> List[Player]:
    """
    Applies one rating period to every player of a roster.

    All games are evaluated against the ratings players had before the period, so the order of
    players and games does not matter. Players with no games in the schedule keep their rating
    but their deviation grows by their volatility. Inactive players are returned unchanged.

    Parameters:
        players (Sequence[Player]): the roster at the start of the period
        schedule (Mapping[int, Sequence[Opponent]]): games per roster index, from that player's point of view
        tau (float): system constant
        **kwargs: solver settings passed on to rate

    Returns:
        List[Player]: new snapshots in roster order
    """
    snapshot = tuple(players)
    rated = []
    for idx, player in enumerate(snapshot):
        opponents = schedule.get(idx)
        if not player.active:
            rated.append(player)
        elif opponents:
            rated.append(rate_player(player, opponents, snapshot, tau, **kwargs))
        else:
            mu, phi = scale(player.r, player.rd)
            _, rd = unscale(mu, phi_star(player.sigma, phi))
            rated.append(dataclasses.replace(player, rd=rd))
    return rated
