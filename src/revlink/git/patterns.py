"""Known hosting services and their blob URL shapes.

Entries are tried in order and the first match wins, so host-specific
patterns must come before generic ones.
"""

from revlink.core.models.remote import RemoteURLPattern

DEFAULT_PATTERNS: tuple[RemoteURLPattern, ...] = (
    RemoteURLPattern(
        name="github",
        pattern=r"github\.com[:/](.+?)(?:\.git)?/?$",
        template="https://github.com/%n/blob/%r/%f",
    ),
    RemoteURLPattern(
        name="gitlab",
        pattern=r"gitlab\.com[:/](.+?)(?:\.git)?/?$",
        template="https://gitlab.com/%n/-/blob/%r/%f",
    ),
    RemoteURLPattern(
        name="salsa",
        pattern=r"salsa\.debian\.org[:/](.+?)(?:\.git)?/?$",
        template="https://salsa.debian.org/%n/-/blob/%r/%f",
    ),
    RemoteURLPattern(
        name="bitbucket",
        pattern=r"bitbucket\.org[:/](.+?)(?:\.git)?/?$",
        template="https://bitbucket.org/%n/src/%r/%f",
    ),
    RemoteURLPattern(
        name="codeberg",
        pattern=r"codeberg\.org[:/](.+?)(?:\.git)?/?$",
        template="https://codeberg.org/%n/src/commit/%r/%f",
    ),
    RemoteURLPattern(
        name="sourcehut",
        pattern=r"git\.sr\.ht[:/](~[^/]+/.+?)(?:\.git)?/?$",
        template="https://git.sr.ht/%n/tree/%r/item/%f",
    ),
    RemoteURLPattern(
        name="savannah",
        pattern=r"git\.(?:savannah|sv)\.gnu\.org[:/](?:git/|srv/git/)?(.+?)(?:\.git)?/?$",
        template="https://git.savannah.gnu.org/cgit/%n.git/tree/%f?id=%r",
    ),
)
