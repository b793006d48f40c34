"""Sample hierarchy the filesystem starts with."""

from memfs.vfs.base import ROOT_NAME, DirectoryNode, FileNode


def build_sample_tree() -> DirectoryNode:
    """Build a fresh three-level sample tree.

    Returns:
        The root directory (named "root", rendered as /)
    """
    root = DirectoryNode(ROOT_NAME)

    # Level 1
    documents = DirectoryNode("documents")
    projects = DirectoryNode("projects")
    downloads = DirectoryNode("downloads")
    root.add_child(documents)
    root.add_child(projects)
    root.add_child(downloads)

    # Level 2
    work = DirectoryNode("work")
    personal = DirectoryNode("personal")
    documents.add_child(work)
    documents.add_child(personal)

    java_project = DirectoryNode("java-project")
    spring_project = DirectoryNode("spring-project")
    projects.add_child(java_project)
    projects.add_child(spring_project)

    images = DirectoryNode("images")
    videos = DirectoryNode("videos")
    downloads.add_child(images)
    downloads.add_child(videos)

    # Level 3
    reports = DirectoryNode("reports")
    invoices = DirectoryNode("invoices")
    work.add_child(reports)
    work.add_child(invoices)

    photos = DirectoryNode("photos")
    screenshots = DirectoryNode("screenshots")
    images.add_child(photos)
    images.add_child(screenshots)

    # Files
    documents.add_child(FileNode("readme.txt", 1024))
    work.add_child(FileNode("report1.pdf", 2048))
    work.add_child(FileNode("report2.pdf", 3072))
    reports.add_child(FileNode("annual-report.pdf", 5120))
    invoices.add_child(FileNode("invoice-001.pdf", 1536))

    java_project.add_child(FileNode("Main.java", 512))
    java_project.add_child(FileNode("Utils.java", 768))
    spring_project.add_child(FileNode("Application.java", 1024))
    spring_project.add_child(FileNode("Controller.java", 1280))

    photos.add_child(FileNode("vacation.jpg", 4096))
    photos.add_child(FileNode("family.jpg", 3584))
    screenshots.add_child(FileNode("screen1.png", 2048))

    return root
