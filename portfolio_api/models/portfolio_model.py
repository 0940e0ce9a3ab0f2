"""
Portfolio document model

The portfolio is a single MongoDB document made of five sections. Three of
them embed a collection whose elements carry their own ObjectId:

    about.skills            -> "skills"
    projects.items          -> "projects"
    contact.contact_info    -> "contact-info"
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PORTFOLIO_ID = "portfolio"

# collection name -> (section, field holding the embedded list)
COLLECTIONS = {
    "projects": ("projects", "items"),
    "skills": ("about", "skills"),
    "contact-info": ("contact", "contact_info"),
}


def split_comma_list(v):
    """Accept a comma separated string as well as a list"""
    if isinstance(v, str):
        return [t.strip() for t in v.split(",") if t.strip()]
    return v


class Item(BaseModel):
    """Base for embedded collection elements"""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(default=None, description="Element ID, assigned on insert")


class Skill(Item):
    icon: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class Project(Item):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    technologies: List[str] = Field(default_factory=list)
    frontend_url: str = ""
    backend_url: str = ""
    live_url: str = ""
    image: str = ""
    featured: bool = False
    order: Optional[int] = Field(default=None, description="Display position, defaults to collection length")

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, v):
        return split_comma_list(v)


class ContactInfo(Item):
    icon: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    href: str = "#"


class FooterLink(BaseModel):
    text: str = ""
    url: str = ""


class SocialLinks(BaseModel):
    github: str = ""
    linkedin: str = ""
    email: str = ""


class HeroSection(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    cv_url: str = ""
    social_links: SocialLinks = Field(default_factory=SocialLinks)


class AboutSection(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    paragraph1: str = ""
    paragraph2: str = ""
    paragraph3: str = ""
    profile_image: str = ""
    # None keeps the stored skills untouched
    skills: Optional[List[Skill]] = None


class ProjectsSection(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    items: Optional[List[Project]] = None


class ContactSection(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    response_time: str = ""
    contact_info: Optional[List[ContactInfo]] = None


class FooterSection(BaseModel):
    copyright: str = ""
    description: str = ""
    additional_links: List[FooterLink] = Field(default_factory=list)


SECTION_MODELS = {
    "hero": HeroSection,
    "about": AboutSection,
    "projects": ProjectsSection,
    "contact": ContactSection,
    "footer": FooterSection,
}

# section -> field holding its embedded collection
SECTION_COLLECTION_FIELDS = {section: field for section, field in COLLECTIONS.values()}


def build_default_portfolio() -> Dict[str, Any]:
    """Content written the first time the portfolio is read"""
    return {
        "hero": HeroSection(
            title="Full Stack Developer",
            subtitle="Building modern web applications with Python, JavaScript and MongoDB",
            description="Passionate about creating clean, efficient code and beautiful user experiences. "
                        "Let's build something amazing together.",
        ).model_dump(),
        "about": AboutSection(
            title="About Me",
            subtitle="A passionate developer with expertise in modern web technologies",
            description="I'm a dedicated full-stack developer with a passion for creating innovative web "
                        "applications that solve real-world problems.",
            paragraph1="My journey in web development started with a curiosity about how websites work, and it "
                       "has evolved into a career focused on clean code, optimal performance, and exceptional "
                       "user experiences.",
            paragraph2="When I'm not coding, you can find me exploring new technologies, contributing to "
                       "open-source projects, or sharing knowledge with the developer community.",
            skills=[
                Skill(icon="Code", title="Frontend Development",
                      description="React, TypeScript, Tailwind CSS, Next.js"),
                Skill(icon="Database", title="Backend Development",
                      description="Python, FastAPI, MongoDB, PostgreSQL"),
                Skill(icon="Globe", title="Full Stack Applications",
                      description="RESTful APIs, Authentication, Deployment"),
                Skill(icon="Smartphone", title="Mobile Responsive",
                      description="Progressive Web Apps, Mobile-first design"),
            ],
        ).model_dump(),
        "projects": ProjectsSection(
            title="Featured Projects",
            subtitle="A showcase of my recent work and personal projects",
            items=[],
        ).model_dump(),
        "contact": ContactSection(
            title="Get In Touch",
            subtitle="Let's discuss your next project or collaboration opportunity",
            description="I'm always interested in hearing about new opportunities and exciting projects. "
                        "Whether you're a company looking to hire, or a fellow developer wanting to "
                        "collaborate, I'd love to hear from you.",
            response_time="Typically responds within 24 hours",
            contact_info=[
                ContactInfo(icon="Mail", title="Email", value="you@example.com", href="mailto:you@example.com"),
                ContactInfo(icon="Phone", title="Phone", value="+10000000000", href="tel:+10000000000"),
                ContactInfo(icon="MapPin", title="Location", value="Earth", href="#"),
            ],
        ).model_dump(),
        "footer": FooterSection(
            copyright="© All rights reserved.",
            description="Building digital experiences with passion and precision.",
        ).model_dump(),
    }
