# ===== apps/analytics/stats.py =====
"""
Derived journal statistics.

Everything here is a pure function over in-memory rows (model instances or
any object exposing the same attribute names). Nothing is cached; callers
recompute on every request. Amounts keep whatever numeric type the rows
carry (``Decimal`` from the ORM); percentages come back as ``float``.
"""
from collections import OrderedDict
import math

TRADE_STATUSES = ('Running', 'Exited', 'Stop Hit')
UNASSIGNED = 'Unassigned'


def _pct(part, whole):
    if not whole:
        return None
    return float(part) / float(whole) * 100


# ============================================================
# TRADES
# ============================================================

def is_closed(trade):
    """A trade counts toward realized P&L once it has an exit price and a qty."""
    return bool(trade.exit_price) and bool(trade.qty)


def is_win(trade):
    # ties are losses
    return (trade.exit_price or 0) > trade.buy_price


def realized_pnl(trades):
    return sum(
        ((t.exit_price - t.buy_price) * t.qty for t in trades if is_closed(t)),
        0,
    )


def trade_stats(trades):
    trades = list(trades)
    closed = [t for t in trades if is_closed(t)]
    wins = [t for t in closed if is_win(t)]

    by_status = OrderedDict((s, 0) for s in TRADE_STATUSES)
    for t in trades:
        by_status[t.status] = by_status.get(t.status, 0) + 1

    running = [t for t in trades if t.status == 'Running']

    return {
        'total': len(trades),
        'by_status': dict(by_status),
        'open': len(running),
        'deployed': sum((t.deployed or 0 for t in running), 0),
        'closed': len(closed),
        'wins': len(wins),
        'losses': len(closed) - len(wins),
        'win_rate': _pct(len(wins), len(closed)),
        'realized_pnl': realized_pnl(closed),
    }


def trade_metrics(trade):
    """Per-trade figures shown on the journal card."""
    buy = trade.buy_price
    metrics = {
        'pnl': None,
        'pnl_pct': None,
        'sl_pct': None,
        'target_pct': None,
        'risk_reward': None,
        'risk_amount': None,
    }

    if trade.exit_price and buy is not None:
        metrics['pnl'] = (trade.exit_price - buy) * (trade.qty or 0)
        if buy:
            metrics['pnl_pct'] = float(trade.exit_price - buy) / float(buy) * 100

    if trade.sl and buy:
        metrics['sl_pct'] = float(buy - trade.sl) / float(buy) * 100
        metrics['risk_amount'] = (buy - trade.sl) * (trade.qty or 0)

    if trade.target and buy:
        metrics['target_pct'] = float(trade.target - buy) / float(buy) * 100

    if metrics['sl_pct'] and metrics['target_pct'] is not None:
        metrics['risk_reward'] = metrics['target_pct'] / metrics['sl_pct']

    return metrics


# ============================================================
# IPO
# ============================================================

def is_allotted(record):
    return record.allotted == 'Yes'


def is_sold(record):
    return is_allotted(record) and bool(record.selling_price) and bool(record.qty_allotted)


def ipo_profit(record):
    """Realized gain on a sold allotment, else None."""
    if not is_sold(record):
        return None
    return (record.selling_price - record.ipo_price) * record.qty_allotted


def ipo_record_metrics(record):
    ipo_price = record.ipo_price or 0
    qty = record.qty_allotted or 0
    selling = record.selling_price or 0
    listing = record.listing_price or 0

    return {
        'profit': (selling - ipo_price) * qty if qty > 0 and selling > 0 else None,
        'profit_pct': _change_pct(selling, ipo_price),
        'listing_gain': (listing - ipo_price) * qty if qty > 0 and listing > 0 else None,
        'listing_gain_pct': _change_pct(listing, ipo_price),
    }


def _change_pct(price, base):
    if base > 0 and price > 0:
        return float(price - base) / float(base) * 100
    return None


def ipo_stats(records):
    records = list(records)
    allotted = [r for r in records if is_allotted(r)]
    sold = [r for r in allotted if is_sold(r)]
    invested = sum((r.ipo_price * (r.qty_allotted or 0) for r in allotted), 0)
    pnl = sum((ipo_profit(r) for r in sold), 0)

    return {
        'applied': len(records),
        'allotted': len(allotted),
        'allotment_rate': _pct(len(allotted), len(records)),
        'sold': len(sold),
        'wins': len([r for r in sold if r.selling_price > r.ipo_price]),
        'invested': invested,
        'realized_pnl': pnl,
        'return_pct': _pct(pnl, invested),
    }


def _rollup(records, key):
    groups = OrderedDict()
    for r in records:
        k = key(r)
        row = groups.get(k)
        if row is None:
            row = groups[k] = {'applied': 0, 'allotted': 0, 'invested': 0, 'profit': 0, 'sold': 0, 'wins': 0}

        row['applied'] += 1
        if not is_allotted(r):
            continue

        row['allotted'] += 1
        row['invested'] += r.ipo_price * (r.qty_allotted or 0)
        if is_sold(r):
            row['sold'] += 1
            row['profit'] += ipo_profit(r)
            if r.selling_price > r.ipo_price:
                row['wins'] += 1

    for row in groups.values():
        row['return_pct'] = _pct(row['profit'], row['invested'])
    return groups


def _year_sort_key(year):
    try:
        return (1, int(year))
    except (TypeError, ValueError):
        return (0, 0)


def ipo_by_year(records):
    """Per-year rollup, newest year first."""
    groups = _rollup(records, lambda r: r.year)
    return [
        dict(year=year, **groups[year])
        for year in sorted(groups, key=_year_sort_key, reverse=True)
    ]


def ipo_by_account(records, accounts):
    names = {a.id: f"{a.holder_name} ({a.demat_provider})" for a in accounts}
    groups = _rollup(records, lambda r: r.account_id if r.account_id in names else None)

    rows = []
    for account_id, row in groups.items():
        label = names.get(account_id, UNASSIGNED)
        rows.append(dict(account_id=account_id, account=label, **row))
    rows.sort(key=lambda r: (r['account_id'] is None, r['account']))
    return rows


# ============================================================
# POSITION SIZING
# ============================================================

def position_size(capital, risk_pct, sl_pct):
    """
    Max position for a given risk budget.

    risk_amount = capital * risk_pct / 100
    max_position = risk_amount / (sl_pct / 100)

    Inputs are not range-checked; a zero stop distance gives inf (nan when
    the risk amount is also zero), matching float division semantics.
    """
    risk_amount = float(capital) * float(risk_pct) / 100
    sl_pct = float(sl_pct)

    if sl_pct == 0:
        if risk_amount == 0 or math.isnan(risk_amount):
            max_position = math.nan
        else:
            max_position = math.copysign(math.inf, risk_amount)
    else:
        # equals risk_amount / (sl_pct / 100)
        max_position = risk_amount * 100 / sl_pct

    return {'risk_amount': risk_amount, 'max_position': max_position}


def quantity_for_price(max_position, price):
    """Whole shares affordable within max_position, None when it cannot be sized."""
    price = float(price)
    if price <= 0 or not math.isfinite(max_position):
        return None
    return math.floor(max_position / price)


# ============================================================
# DASHBOARD
# ============================================================

def portfolio_summary(trades, records, capital_total):
    swing = trade_stats(trades)
    ipo = ipo_stats(records)

    deployment_pct = 0.0
    if capital_total and capital_total > 0:
        deployment_pct = float(swing['deployed']) / float(capital_total) * 100

    return {
        'capital': capital_total,
        'deployed': swing['deployed'],
        'available': capital_total - swing['deployed'],
        'deployment_pct': deployment_pct,
        'combined_pnl': swing['realized_pnl'] + ipo['realized_pnl'],
        'swing': swing,
        'ipo': ipo,
    }
