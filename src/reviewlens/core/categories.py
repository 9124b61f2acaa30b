"""Problem category catalog and phrase-mining stopwords for app reviews."""

from typing import FrozenSet, Iterable, Tuple

from .models import ProblemCategory


def _category(category_id: str, name: str, icon: str, keywords: Iterable[str]) -> ProblemCategory:
    # dict.fromkeys drops repeated keywords but keeps their order
    return ProblemCategory(id=category_id, name=name, icon=icon, keywords=tuple(dict.fromkeys(keywords)))


PROBLEM_CATEGORIES: Tuple[ProblemCategory, ...] = (
    _category("crashes", "App Crashes & Freezing", "💥", [
        "crash", "crashed", "crashes", "crashing", "freeze", "freezes", "freezing", "froze", "frozen",
        "hang", "hangs", "hanging", "stuck", "unresponsive", "force close", "force quit", "shut down",
        "shuts down", "stopped working", "not responding", "black screen", "white screen",
    ]),
    _category("performance", "Performance & Speed", "🐌", [
        "slow", "slower", "slowest", "lag", "lags", "lagging", "laggy", "sluggish", "buffer",
        "buffering", "loading", "takes forever", "long time", "wait", "waiting", "delay", "delayed",
        "delays", "heavy", "resource", "memory", "ram", "cpu",
    ]),
    _category("bugs", "Bugs & Glitches", "🐛", [
        "bug", "bugs", "buggy", "glitch", "glitches", "glitchy", "error", "errors", "broken", "break",
        "breaks", "breaking", "defect", "defects", "fault", "faulty", "malfunction", "issue", "issues",
        "problem", "problems", "not working", "does not work", "doesnt work", "doesn't work", "fails",
        "failed", "failing",
    ]),
    _category("ui_ux", "UI/UX Design Issues", "🎨", [
        "ugly", "confusing", "confused", "hard to use", "difficult to use", "complicated",
        "unintuitive", "not intuitive", "bad design", "poor design", "layout", "navigation",
        "navigate", "interface", "cluttered", "messy", "small text", "small font", "hard to read",
        "hard to find", "too small", "too big", "redesign",
    ]),
    _category("battery", "Battery & Resource Drain", "🔋", [
        "battery", "drain", "draining", "drains", "drained", "power", "consumption", "overheat",
        "overheating", "hot", "heats up", "heating", "warm", "energy",
    ]),
    _category("ads", "Ads & Monetization", "📢", [
        "ads", "ad", "advertisement", "advertisements", "advertising", "popup", "popups", "pop-up",
        "pop-ups", "banner", "banners", "intrusive", "annoying ads", "too many ads", "full screen ad",
        "video ad", "unskippable", "pay to win", "paywall", "paywall", "microtransaction",
        "in-app purchase", "subscription", "overpriced", "expensive", "costly", "money grab",
        "cash grab", "greedy", "ripoff", "rip-off", "rip off",
    ]),
    _category("privacy", "Privacy & Security", "🔒", [
        "privacy", "private", "data", "tracking", "track", "tracks", "spy", "spying", "spyware",
        "malware", "virus", "hack", "hacked", "hacking", "security", "insecure", "unsafe",
        "permission", "permissions", "access", "collect", "collecting", "personal", "identity",
        "stolen", "leak", "leaked", "breach", "suspicious",
    ]),
    _category("updates", "Update Issues", "🔄", [
        "update", "updated", "updates", "updating", "new version", "latest version", "after update",
        "since update", "last update", "recent update", "downgrade", "rollback", "revert",
        "old version", "previous version", "worse after", "ruined", "changed", "removed feature",
        "missing feature",
    ]),
    _category("login", "Login & Account Issues", "🔑", [
        "login", "log in", "signin", "sign in", "signup", "sign up", "register", "registration",
        "account", "password", "forgot password", "reset password", "verification", "verify", "otp",
        "authentication", "two factor", "2fa", "locked out", "cant login", "can't login",
        "access denied", "logout", "log out", "session",
    ]),
    _category("notifications", "Notification Problems", "🔔", [
        "notification", "notifications", "notify", "alert", "alerts", "push notification", "spam",
        "spamming", "spammy", "too many notifications", "constant", "nonstop",
        "annoying notification", "unwanted", "reminder", "reminders",
    ]),
    _category("connectivity", "Network & Connectivity", "📡", [
        "connection", "connect", "connected", "connecting", "disconnect", "disconnected",
        "disconnects", "offline", "online", "wifi", "wi-fi", "network", "internet", "server",
        "servers", "timeout", "timed out", "sync", "syncing", "synced", "load", "loading failed",
        "cant connect", "can't connect", "no connection",
    ]),
    _category("content", "Content & Feature Gaps", "📝", [
        "missing", "lacks", "lacking", "limited", "limitation", "limitations", "feature", "features",
        "need", "needs", "want", "wanted", "wish", "wished", "hoping", "hope", "add", "should have",
        "doesnt have", "doesn't have", "no option", "no way", "basic", "incomplete", "half-baked",
        "unfinished",
    ]),
    _category("support", "Customer Support", "🎧", [
        "support", "customer service", "customer support", "help", "response", "respond",
        "responding", "replied", "reply", "contact", "email", "ticket", "complaint", "complained",
        "resolution", "resolve", "resolved", "unresolved", "ignored", "ignore", "ignores",
        "unhelpful", "rude", "unprofessional",
    ]),
)

# Common English words that make poor phrase anchors
PHRASE_STOPWORDS: FrozenSet[str] = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had", "her", "was", "one",
    "our", "out", "has", "have", "been", "this", "that", "with", "they", "from", "will", "would",
    "there", "their", "what", "about", "which", "when", "make", "like", "just", "very", "than",
    "them", "other", "into", "some", "could", "more", "its",
})
