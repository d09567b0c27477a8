import pytest

from barwm.wm.manager import WindowManager
from barwm.wm.model import Monitor

SW, SH, BH = 1000, 800, 46


def make_wm():
    return WindowManager(SW, SH, BH)


def add_monitor(wm, num, x, w, h):
    m = Monitor(num=num, mx=x, wx=x, mw=w, ww=w, mh=h, wh=h)
    m.update_bar_pos(wm.bar_height)
    wm.monitors.append(m)
    return m


def test_initial_monitor_geometry():
    wm = make_wm()
    m = wm.selmon
    assert m.wy == BH
    assert m.wh + BH == SH
    assert m.ww == SW
    assert wm.monitors == [m]


def test_manage_single_client_fills_window_area():
    wm = make_wm()
    c = wm.manage(1, 10, 10, 100, 100, name="term")
    m = wm.selmon
    assert wm.find_client(1) is c
    assert m.sel is c
    assert c.geometry == (m.wx, m.wy, m.ww, m.wh)


def test_manage_empty_name_marks_broken():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    assert c.name == "broken"


def test_find_client_unknown():
    wm = make_wm()
    wm.manage(1, 0, 0, 100, 100)
    assert wm.find_client(99) is None


def test_newest_client_is_master():
    wm = make_wm()
    a = wm.manage(1, 0, 0, 100, 100)
    b = wm.manage(2, 0, 0, 100, 100)
    m = wm.selmon
    assert m.clients[0] is b
    assert m.sel is b
    assert b.x == m.wx
    assert a.x == b.x + b.w
    assert a.w + b.w == m.ww


def test_rules_gimp_floats_and_firefox_tagged():
    wm = make_wm()
    gimp = wm.manage(1, 0, 0, 300, 300, wm_class="Gimp")
    fox = wm.manage(2, 0, 0, 300, 300, wm_class="Firefox")
    assert gimp.isfloating is True
    assert fox.tags == 1 << 8
    assert fox.isfloating is False


def test_rule_without_match_takes_current_view():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 300, 300, wm_class="xterm")
    assert c.tags == wm.selmon.tagset[wm.selmon.seltags]


def test_transient_inherits_tags_and_floats():
    wm = make_wm()
    parent = wm.manage(1, 0, 0, 300, 300)
    wm.tag(1 << 3)
    child = wm.manage(2, 0, 0, 50, 50, transient_for=parent.win)
    assert child.tags == parent.tags
    assert child.isfloating is True


def test_unmanage_refocuses_remaining():
    wm = make_wm()
    a = wm.manage(1, 0, 0, 100, 100)
    b = wm.manage(2, 0, 0, 100, 100)
    wm.unmanage(b)
    assert wm.find_client(2) is None
    assert wm.selmon.sel is a
    assert a.geometry == (wm.selmon.wx, wm.selmon.wy, wm.selmon.ww, wm.selmon.wh)


def test_view_hides_and_returns():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    wm.view(1 << 1)
    assert wm.selmon.sel is None
    assert not wm.selmon.is_visible(c)
    wm.view(0)
    assert wm.selmon.sel is c
    assert wm.selmon.is_visible(c)


def test_view_all_tags():
    wm = make_wm()
    wm.view(~0)
    assert wm.selmon.tagset[wm.selmon.seltags] == (1 << len(wm.tags)) - 1


def test_toggleview_never_empty():
    wm = make_wm()
    current = wm.selmon.tagset[wm.selmon.seltags]
    wm.toggleview(current)
    assert wm.selmon.tagset[wm.selmon.seltags] == current
    wm.toggleview(1 << 2)
    assert wm.selmon.tagset[wm.selmon.seltags] == current | (1 << 2)


def test_tag_and_toggletag():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    wm.toggletag(c.tags)
    assert c.tags == 1
    wm.toggletag(1 << 4)
    assert c.tags == 1 | (1 << 4)
    wm.tag(1 << 4)
    assert c.tags == 1 << 4
    assert wm.selmon.sel is None


def test_setmfact_bounds_and_absolute():
    wm = make_wm()
    before = wm.selmon.mfact
    wm.setmfact(0.5)
    assert wm.selmon.mfact == before
    wm.setmfact(1.3)
    assert wm.selmon.mfact == pytest.approx(0.3)
    wm.setmfact(0.05)
    assert wm.selmon.mfact == pytest.approx(0.35)


def test_setmfact_ignored_in_floating_layout():
    wm = make_wm()
    wm.setlayout(wm.layouts[1])
    before = wm.selmon.mfact
    wm.setmfact(0.1)
    assert wm.selmon.mfact == before


def test_incnmaster_not_below_zero():
    wm = make_wm()
    wm.incnmaster(-5)
    assert wm.selmon.nmaster == 0
    wm.incnmaster(2)
    assert wm.selmon.nmaster == 2


def test_setlayout_monocle_symbol_and_toggle_back():
    wm = make_wm()
    wm.manage(1, 0, 0, 100, 100)
    wm.manage(2, 0, 0, 100, 100)
    wm.setlayout(wm.layouts[2])
    assert wm.selmon.ltsymbol == "[2]"
    for c in wm.selmon.clients:
        assert c.w == wm.selmon.ww
    wm.setlayout(None)
    assert wm.selmon.ltsymbol == wm.layouts[0].symbol


def test_togglefloating():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    wm.togglefloating()
    assert c.isfloating is True
    wm.togglefloating()
    assert c.isfloating is False


def test_togglebar_changes_window_area():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    wm.togglebar()
    assert wm.selmon.wh == SH
    assert wm.selmon.by == -BH
    assert c.h == SH
    wm.togglebar()
    assert wm.selmon.wy == BH


def test_fullscreen_and_restore():
    wm = make_wm()
    c = wm.manage(1, 0, 0, 100, 100)
    m = wm.selmon
    wm.setfullscreen(c, True)
    assert c.geometry == (m.mx, m.my, m.mw, m.mh)
    assert c.isfloating is True
    wm.setfullscreen(c, False)
    assert c.isfullscreen is False
    assert c.isfloating is False
    assert c.geometry == (m.wx, m.wy, m.ww, m.wh)


def test_focusstack_locked_in_fullscreen():
    wm = make_wm()
    wm.manage(1, 0, 0, 100, 100)
    b = wm.manage(2, 0, 0, 100, 100)
    wm.setfullscreen(b, True)
    wm.focusstack(1)
    assert wm.selmon.sel is b


def test_focusstack_cycles():
    wm = make_wm()
    a = wm.manage(1, 0, 0, 100, 100)
    b = wm.manage(2, 0, 0, 100, 100)
    c = wm.manage(3, 0, 0, 100, 100)
    assert wm.selmon.clients == [c, b, a]
    wm.focusstack(1)
    assert wm.selmon.sel is b
    wm.focusstack(1)
    assert wm.selmon.sel is a
    wm.focusstack(1)
    assert wm.selmon.sel is c
    wm.focusstack(-1)
    assert wm.selmon.sel is a
    assert wm.selmon.stack[0] is a


def test_zoom_swaps_master():
    wm = make_wm()
    a = wm.manage(1, 0, 0, 100, 100)
    b = wm.manage(2, 0, 0, 100, 100)
    wm.zoom()
    assert wm.selmon.clients[0] is a
    assert wm.selmon.sel is a
    wm.focus(b)
    wm.zoom()
    assert wm.selmon.clients[0] is b


def test_zoom_single_client_noop():
    wm = make_wm()
    a = wm.manage(1, 0, 0, 100, 100)
    wm.zoom()
    assert wm.selmon.clients == [a]


def test_dirtomon_wraps():
    wm = make_wm()
    first = wm.selmon
    second = add_monitor(wm, 1, SW, SW, SH)
    assert wm.dirtomon(1) is second
    assert wm.dirtomon(-1) is second
    wm.selmon = second
    assert wm.dirtomon(1) is first


def test_recttomon_picks_largest_overlap():
    wm = make_wm()
    first = wm.selmon
    second = add_monitor(wm, 1, SW, SW, SH)
    assert wm.recttomon(SW + 10, 100, 10, 10) is second
    assert wm.recttomon(10, 100, 10, 10) is first
    assert wm.recttomon(-500, -500, 1, 1) is first


def test_sendmon_and_tagmon():
    wm = make_wm()
    first = wm.selmon
    second = add_monitor(wm, 1, SW, SW, SH)
    c = wm.manage(1, 0, 0, 100, 100)
    wm.tagmon(1)
    assert c.mon is second
    assert c in second.clients
    assert c not in first.clients
    assert c.tags == second.tagset[second.seltags]
    assert first.sel is None


def test_focusmon():
    wm = make_wm()
    second = add_monitor(wm, 1, SW, SW, SH)
    wm.focusmon(1)
    assert wm.selmon is second


def test_focusmon_single_monitor_noop():
    wm = make_wm()
    first = wm.selmon
    wm.focusmon(1)
    assert wm.selmon is first


def test_resize_reports_change():
    wm = make_wm()
    wm.setlayout(wm.layouts[1])
    c = wm.manage(1, 100, 100, 200, 200)
    assert wm.resize(c, c.x, c.y, c.w, c.h, False) is False
    assert wm.resize(c, c.x + 5, c.y, c.w, c.h, False) is True
    assert c.oldx + 5 == c.x


def test_quit():
    wm = make_wm()
    assert wm.running is True
    wm.quit()
    assert wm.running is False