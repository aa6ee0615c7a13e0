"""Exception types raised by the connection and trust subsystem."""


class DashboardError(Exception):
    """Base class for all ssh_dashboard errors."""


class NoAuthMethodError(DashboardError):
    """No agent and no usable private key for a host."""

    def __init__(self, host_name: str):
        self.host_name = host_name
        super().__init__(
            f"No authentication methods available for {host_name}: "
            f"start an SSH agent or add an unencrypted key"
        )


class HostKeyVerificationError(DashboardError):
    """Host key verification failed for a reason other than unknown/changed."""

    def __init__(self, hostname: str, known_hosts_path: str, reason: str):
        self.hostname = hostname
        self.known_hosts_path = known_hosts_path
        self.reason = reason
        super().__init__(f"host key verification failed: {reason}")


class UnknownHostKeyError(HostKeyVerificationError):
    """The host has no entry in known_hosts."""

    def __init__(self, hostname: str, known_hosts_path: str):
        super().__init__(
            hostname,
            known_hosts_path,
            f"{hostname} is not in known_hosts. Add the host key to "
            f"{known_hosts_path} or run 'ssh {hostname}' first to accept the host key",
        )


class HostKeyChangedError(HostKeyVerificationError):
    """The host has known_hosts entries but none match the presented key."""

    def __init__(self, hostname: str, known_hosts_path: str):
        super().__init__(
            hostname,
            known_hosts_path,
            f"host key has changed for {hostname}. Remove the old key from "
            f"{known_hosts_path} if you trust this connection",
        )


class DialError(DashboardError):
    """Failed to establish the SSH transport."""

    def __init__(self, address: str, original_error: BaseException):
        self.address = address
        self.original_error = original_error
        super().__init__(f"failed to connect to {address}: {original_error}")


class ExecError(DashboardError):
    """Remote command ran but did not exit cleanly.

    The merged stdout/stderr is kept on ``output`` so callers can still show it.
    """

    def __init__(self, command: str, exit_status: int | None, output: str):
        self.command = command
        self.exit_status = exit_status
        self.output = output
        status = "signal" if exit_status is None else f"status {exit_status}"
        super().__init__(f"command {command!r} exited with {status}")


class ChannelError(DashboardError):
    """Could not open a channel or run a command on the session."""

    def __init__(self, command: str, original_error: BaseException):
        self.command = command
        self.original_error = original_error
        super().__init__(f"cannot run {command!r}: {original_error}")


class SessionClosedError(DashboardError):
    """Command issued on a session that is not open."""

    def __init__(self, host_name: str):
        self.host_name = host_name
        super().__init__(f"session to {host_name} is closed")


class HandoffError(DashboardError):
    """Could not replace the process with an interactive ssh client."""

    def __init__(self, host_name: str, reason: str):
        self.host_name = host_name
        self.reason = reason
        super().__init__(f"cannot hand off to ssh {host_name}: {reason}")


class SSHNotFoundError(HandoffError):
    """The ssh client executable is not on PATH."""

    def __init__(self, host_name: str, ssh_binary: str):
        self.ssh_binary = ssh_binary
        super().__init__(host_name, f"{ssh_binary} not found on PATH")
