import os

from invoke import Collection, task


@task
def test(
    ctx,
    verbose=True,
    color=True,
    capture="sys",
    module=None,
    k=None,
    x=False,
    opts="",
):
    """
    Run unit tests via pytest.
    """
    if verbose and "--verbose" not in opts and "-v" not in opts:
        opts += " --verbose"
    if color:
        opts += " --color=yes"
    opts += " --capture={}".format(capture)
    if k is not None and not ("-k" in opts if opts else False):
        opts += " -k {}".format(k)
    if x and not ("-x" in opts if opts else False):
        opts += " -x"
    modstr = ""
    if module is not None:
        modstr = os.path.join("tests", "test_{}.py".format(module))
    # Strip SSH_AUTH_SOCK from parent env to avoid pollution by interactive
    # users.
    env = dict(os.environ)
    if "SSH_AUTH_SOCK" in env:
        del env["SSH_AUTH_SOCK"]
    cmd = "pytest {} {}".format(opts, modstr)
    ctx.run(cmd, pty=True, env=env, replace_env=True)


ns = Collection(test)
