"""Static sections prepended to the combined MAINTAINERS file.

``RULES`` and ``ROLES`` are TOML tables themselves, so the assembled file
stays parseable by any TOML reader.
"""

HEADER = """#
# THIS FILE IS AUTOGENERATED; SEE "./maintainercollector"!
#
# Docker projects maintainers file
#
# This file describes who runs the Docker project and how.
# This is a living document - if you see something out of date or missing,
# speak up!
#
# It is structured to be consumable by both humans and programs.
# To extract its contents programmatically, use any TOML-compliant
# parser.
"""

RULES = '''
[Rules]

    [Rules.maintainers]

    title = "What is a maintainer?"

    text = """
There are different types of maintainers, with different responsibilities, but
all maintainers have 3 things in common:

1) They share responsibility in the project's success.
2) They have made a long-term, recurring time investment to improve the project.
3) They spend that time doing whatever needs to be done, not necessarily what
is the most interesting or fun.

Maintainers are often under-appreciated, because their work is harder to appreciate.
It's easy to appreciate a really cool and technically advanced feature. It's harder
to appreciate the absence of bugs, the slow but steady improvement in stability,
or the reliability of a release process. But those things distinguish a good
project from a great one.
"""

    [Rules.adding-maintainers]

    title = "How are maintainers added?"

    text = """
Maintainers are first and foremost contributors that have shown they are
committed to the long term success of a project. Contributors wanting to become
maintainers are expected to be deeply involved in contributing code, pull
request review, and triage of issues in the project for more than three months.

Just contributing does not make you a maintainer, it is about building trust
with the current maintainers of the project and being a person that they can
depend on and trust to make decisions in the best interest of the project.

Periodically, the existing maintainers curate a list of contributors that have
shown regular activity on the project over the prior months. From this list,
maintainer candidates are selected and proposed on the maintainers mailing list.

After a candidate has been announced on the maintainers mailing list, the
existing maintainers are given five business days to discuss the candidate,
raise objections and cast their vote. Votes may take place on the mailing list
or via pull request comment. Candidates must be approved by at least 66% of the
current maintainers by adding their vote on the mailing list. Only maintainers
of the repository that the candidate is proposed for are allowed to vote.

If a candidate is approved, a maintainer will contact the candidate to invite
the candidate to open a pull request that adds the contributor to the
MAINTAINERS file. The candidate becomes a maintainer once the pull request is
merged.
"""

    [Rules.stepping-down-policy]

    title = "Stepping down policy"

    text = """
Everyone makes mistakes and everyone changes their mind. Maintainers can step
down at any time: all they need to do is open a pull request removing
themselves from the MAINTAINERS file of the project, and state a reason if they
wish to.
"""

    [Rules.inactive-maintainers]

    title = "Removal of inactive maintainers"

    text = """
Similar to the procedure for adding new maintainers, existing maintainers can
be removed from the list if they do not show significant activity on the
project. Periodically, the maintainers review the list of maintainers and their
activity over the last three months.

If a maintainer has shown insufficient activity over this period, a neutral
person will contact the maintainer to ask if they want to continue being
a maintainer. If the maintainer decides to step down as a maintainer, they
open a pull request to be removed from the MAINTAINERS file.

If the maintainer wants to remain a maintainer, but is unable to perform the
required duties they can be removed with a vote of at least 66% of the current
maintainers. An e-mail is sent to the mailing list, inviting maintainers of the
project to vote. The voting period is five business days.
"""

    [Rules.decisions]

    title = "How are decisions made?"

    text = """
Short answer: EVERYTHING IS A PULL REQUEST.

All projects are open-source projects. All decisions affecting a project,
big and small, follow the same steps:

  * Step 1: Open a pull request. Anyone can do this.

  * Step 2: Discuss the pull request. Anyone can do this.

  * Step 3: Maintainers merge, close or reject the pull request.

Pull requests are reviewed by the current maintainers of the project. At least
two maintainers must approve a change before it is merged.
"""

    [Rules.DCO]

    title = "Helping contributors with the DCO"

    text = """
The [DCO or `Sign your work`](https://github.com/moby/moby/blob/master/CONTRIBUTING.md#sign-your-work)
requirement is not intended as a roadblock or speed bump.

Some contributors are not as familiar with `git`, or have used a web
based editor, and thus asking them to `git commit --amend -s` is not the best
way forward. In this case, maintainers can update the commits based on clause
(c) of the DCO.
"""

    [Rules.conflict]

    title = "What if a maintainer disagrees with a decision?"

    text = """
Maintainers should try to resolve disagreements among themselves through
discussion on the pull request. If no consensus can be reached, the decision
is escalated to the chief maintainer of the project, whose decision is final.
"""
'''

ROLES = '''
[Roles]

    [Roles.maintainer]

    title = "Maintainer"

    text = """
A maintainer reviews and merges pull requests, triages issues, and takes part
in release and roadmap decisions for the projects they are listed under.
Every project section in [Org] lists that project's maintainers by nickname.
"""

    [Roles.curator]

    title = "Curator"

    text = """
A curator is a person who assists the maintainers in keeping issues and pull
requests organized. Curators can label, close and comment on issues and pull
requests, but cannot merge code. The [Org.Curators] section lists the curators
across all projects.
"""

    [Roles.docs-maintainer]

    title = "Docs maintainer"

    text = """
A docs maintainer reviews and merges changes to documentation. Docs
maintainers are listed in the [Org."Docs maintainers"] section and may approve
documentation-only pull requests on any project.
"""

'''
