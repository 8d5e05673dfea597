"""Human-readable registry summary rendering."""

from __future__ import annotations

from .models import RegistrySummary


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def render_summary(summary: RegistrySummary) -> str:
    """Return the multi-section text report for a registry summary."""
    config = summary.config

    lines = []
    lines.append("📦 Registry Summary")
    lines.append("📄 .npmrc files used:")
    if config.files:
        for path in config.files:
            lines.append(f"   - {path}")
    else:
        lines.append("   (none)")
    lines.append(f"🔧 Default registry: {config.default_registry}")
    lines.append("\tOther:")
    for scope, registry in config.registries.items():
        lines.append(f"\t🔧 {scope} → {registry}")

    if not summary.scopes:
        lines.append("ℹ️  No scoped packages found in lockfile.")
        return "\n".join(lines) + "\n"

    if not summary.non_default_scopes:
        lines.append("✅ All scoped packages use the default registry.")
        return "\n".join(lines) + "\n"

    lines.append("⚠️  Scopes using non-default registries:")
    for scope in summary.non_default_scopes:
        lines.append(f"   {scope} → {config.registries[scope]}")

    for registry, packages in summary.packages_by_registry.items():
        lines.append("")
        lines.append(f"📋 {registry}")
        for package in packages:
            lines.append(f"   - {package}")

    lines.append("")
    lines.append(
        f"📊 {len(summary.non_default_scopes)} of {len(summary.scopes)} "
        "scope(s) use custom registries"
    )
    registries = summary.registry_count
    lines.append(
        f"📊 {summary.total_packages} package(s) from {registries} custom "
        f"{_plural(registries, 'registry', 'registries')}"
    )

    return "\n".join(lines) + "\n"
