from __future__ import annotations

import hashlib

from prpreview_core.deploy import ChannelSuccessResult


def create_deploy_signature(result: ChannelSuccessResult) -> str:
    """Stable identity for a preview deploy: SHA-1 of its sorted site names.

    Redeploying the same channel keeps the same sites, so the signature (and
    therefore the comment it marks) survives new commits on the PR.
    """
    digest = hashlib.sha1()
    for site in sorted(deploy.site for deploy in result.result.values()):
        digest.update(site.encode("utf-8"))
    return digest.hexdigest()
