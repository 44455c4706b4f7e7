"""
Narrative text for synthesized records, keyed by impact score.

Titles and descriptions are matched pairs: the same index selects both.
Explanations are chosen independently.
"""

from __future__ import annotations

from typing import Dict, Tuple

TitleDescription = Tuple[str, str]

PR_TEMPLATES: Dict[int, Tuple[TitleDescription, ...]] = {
    5: (
        (
            "Implement real-time collaborative state management",
            "Complete architectural redesign enabling multi-user collaboration with advanced conflict resolution",
        ),
        (
            "Complete WebAssembly-based image processing pipeline",
            "Revolutionary performance improvement using WebAssembly for 10x faster image processing",
        ),
        (
            "Redesign multi-user conflict resolution architecture",
            "Distributed system handling concurrent edits across thousands of simultaneous users",
        ),
        (
            "Build distributed consensus system for Canvas",
            "Mission-critical infrastructure enabling real-time collaboration at enterprise scale",
        ),
        (
            "Implement zero-downtime deployment pipeline",
            "Advanced deployment system ensuring zero-downtime releases for millions of users",
        ),
    ),
    4: (
        (
            "Optimize WebGL memory management for large artboards",
            "Memory pooling and garbage collection optimizations for handling 10K+ layer artboards",
        ),
        (
            "Implement presence indicators for collaborative editing",
            "Real-time cursor positions, selection highlights, and user avatars for collaboration UX",
        ),
        (
            "Add advanced caching layer for Canvas state",
            "Intelligent caching system reducing Canvas load times by 60% for complex documents",
        ),
        (
            "Build real-time cursor synchronization",
            "Smooth cursor tracking and user presence visualization across collaborative sessions",
        ),
        (
            "Optimize rendering pipeline for 10+ concurrent users",
            "Performance optimizations enabling smooth collaboration for large design teams",
        ),
    ),
    3: (
        (
            "Add user preference sync across devices",
            "Cross-device synchronization of user preferences and workspace settings",
        ),
        (
            "Implement offline mode for Canvas editing",
            "Offline editing capabilities with intelligent sync when connection restored",
        ),
        (
            "Build notification system for collaborative changes",
            "Real-time notifications when collaborators make changes to shared documents",
        ),
        (
            "Add keyboard shortcuts for power users",
            "Comprehensive keyboard shortcut system for professional designers and power users",
        ),
        (
            "Implement undo/redo for collaborative sessions",
            "Advanced undo/redo system that works seamlessly in multi-user environments",
        ),
    ),
    2: (
        (
            "Fix tooltip positioning edge cases",
            "Corrected tooltip overflow behavior when elements are near viewport boundaries",
        ),
        (
            "Update icon assets for new brand guidelines",
            "Updated all icon assets to align with new brand guidelines and design system",
        ),
        (
            "Improve error messaging for network failures",
            "Enhanced error messages providing clearer guidance when network operations fail",
        ),
        (
            "Add loading states for slow operations",
            "Added progressive loading indicators for operations taking longer than 2 seconds",
        ),
        (
            "Fix responsive layout on mobile devices",
            "Fixed layout responsiveness issues affecting mobile and tablet user experience",
        ),
    ),
    1: (
        (
            "Update copyright year in footer",
            "Changed footer copyright from 2024 to 2025 across all application pages",
        ),
        (
            "Fix typo in help documentation",
            "Corrected spelling error in the collaborative editing help documentation",
        ),
        (
            "Remove unused CSS classes",
            "Cleaned up unused CSS classes reducing bundle size by 2KB",
        ),
        (
            "Update package dependencies to latest versions",
            "Updated non-breaking package dependencies to their latest stable versions",
        ),
        (
            "Fix spelling error in user interface text",
            "Fixed spelling error in tooltip text for the layer selection tool",
        ),
    ),
}

IMPACT_REASONS: Dict[int, Tuple[str, ...]] = {
    5: (
        "Critical infrastructure work enabling multi-user collaboration. Touches core architecture, "
        "introduces distributed consensus algorithms, and unblocks entire feature sets.",
        "Revolutionary performance improvement. Complex integration affecting entire workflow, "
        "enables new real-time capabilities previously impossible.",
        "Mission-critical scalability work. Handles enterprise-scale loads and unblocks major "
        "customer deployments.",
        "Foundational architecture enabling next-generation features. High complexity with broad "
        "system impact.",
    ),
    4: (
        "Significant performance improvement addressing major user pain points. Required deep "
        "technical knowledge and complex optimization patterns.",
        "Important user experience enhancement affecting collaboration workflows. Moderate "
        "architectural complexity with measurable user impact.",
        "Performance optimization enabling better user experience at scale. Technical complexity "
        "with clear business value.",
        "User-facing feature with significant workflow improvements. Good technical execution "
        "solving real problems.",
    ),
    3: (
        "User-visible feature improving collaboration UX. Moderate scope affecting UI layer and "
        "data streams, standard implementation complexity.",
        "Solid feature addition enhancing user workflow. Reasonable scope with good technical "
        "execution.",
        "Quality of life improvement for end users. Standard implementation with clear user benefit.",
        "Workflow enhancement addressing user feedback. Moderate complexity with positive user impact.",
    ),
    2: (
        "Minor bug fix with limited scope. Affects UI polish but doesn't introduce new "
        "functionality or architectural changes.",
        "Small improvement in user experience. Limited scope with straightforward implementation.",
        "Bug fix addressing edge case scenarios. Minimal risk with targeted improvement.",
        "UI enhancement with limited scope. Simple implementation addressing specific user feedback.",
    ),
    1: (
        "Trivial text change. Minimal effort required with no technical complexity.",
        "Simple maintenance task. No architectural impact, minimal effort required.",
        "Basic housekeeping update. Trivial change with no functional impact.",
        "Cosmetic update requiring minimal technical work. No business logic affected.",
    ),
}


__all__ = ["IMPACT_REASONS", "PR_TEMPLATES", "TitleDescription"]
