"""
Demo content loaded into a fresh dashboard when SEED_DEMO_DATA is on.
"""

from .entities import (
    PAGE, SUBMISSION, POST, TESTIMONIAL, TEAM_MEMBER, SERVICE, USER, SITE
)

_PAGE_BODY = """<h2>Welcome to Our Website</h2>
<p>This is sample content for the page. You can edit this content using the rich text editor.</p>
<p>Add your own content here to customize this page for your website.</p>"""

PAGES = [
    {'id': 'homepage', 'name': 'Homepage', 'url': '/', 'status': 'published',
     'last_modified': '2025-01-15 14:30', 'title': 'Homepage', 'content': _PAGE_BODY,
     'meta_title': 'Welcome to Our Company',
     'meta_description': 'Welcome to our company website. Learn more about our services and how we can help you.',
     'is_home': True},
    {'id': 'about', 'name': 'About Us', 'url': '/about', 'status': 'published',
     'last_modified': '2025-01-14 10:15', 'title': 'About Us', 'content': _PAGE_BODY,
     'meta_title': 'About Us - Our Company'},
    {'id': 'services', 'name': 'Services', 'url': '/services', 'status': 'published',
     'last_modified': '2025-01-13 16:45', 'title': 'Services'},
    {'id': 'contact', 'name': 'Contact Us', 'url': '/contact', 'status': 'published',
     'last_modified': '2025-01-12 09:20', 'title': 'Contact Us'},
    {'id': 'privacy', 'name': 'Privacy Policy', 'url': '/privacy', 'status': 'published',
     'last_modified': '2025-01-10 11:30', 'title': 'Privacy Policy'},
    {'id': 'terms', 'name': 'Terms & Conditions', 'url': '/terms', 'status': 'draft',
     'last_modified': '2025-01-08 14:00', 'title': 'Terms & Conditions'},
]

SUBMISSIONS = [
    {'id': '1', 'name': 'John Smith', 'email': 'john@example.com', 'phone': '+1 (555) 123-4567',
     'form_type': 'Contact', 'datetime': '2025-01-15 14:30', 'status': 'new', 'source': 'Contact Page',
     'message': 'I am interested in your services and would like to schedule a consultation.'},
    {'id': '2', 'name': 'Sarah Johnson', 'email': 'sarah@company.com', 'phone': '+1 (555) 987-6543',
     'form_type': 'Quote Request', 'datetime': '2025-01-15 13:15', 'status': 'read', 'source': 'Services Page',
     'message': 'Please provide a quote for your premium package.'},
    {'id': '3', 'name': 'Mike Wilson', 'email': 'mike.wilson@email.com', 'phone': '+1 (555) 456-7890',
     'form_type': 'Newsletter', 'datetime': '2025-01-15 11:45', 'status': 'converted', 'source': 'Homepage',
     'message': 'Subscribe to newsletter'},
    {'id': '4', 'name': 'Emma Davis', 'email': 'emma@startup.io', 'phone': '+1 (555) 234-5678',
     'form_type': 'Contact', 'datetime': '2025-01-15 10:20', 'status': 'new', 'source': 'About Page',
     'message': 'Looking for partnership opportunities.'},
    {'id': '5', 'name': 'David Brown', 'email': 'dbrown@corp.com', 'phone': '+1 (555) 345-6789',
     'form_type': 'Quote Request', 'datetime': '2025-01-15 09:30', 'status': 'read', 'source': 'Contact Page',
     'message': 'Need pricing information for enterprise solution.'},
]

POSTS = [
    {'id': '1', 'title': 'How to Improve Your Business Operations',
     'content': 'Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua...',
     'excerpt': 'Learn the best practices for streamlining your business operations and increasing efficiency.',
     'publish_date': '2025-01-15', 'status': 'published',
     'meta_title': 'Improve Business Operations - Tips & Strategies',
     'meta_description': 'Discover proven strategies to improve your business operations and boost productivity.'},
    {'id': '2', 'title': 'The Future of Digital Marketing',
     'content': 'Digital marketing continues to evolve rapidly. Here are the trends to watch in 2025...',
     'excerpt': 'Explore the latest trends and technologies shaping the future of digital marketing.',
     'publish_date': '2025-01-12', 'status': 'published',
     'meta_title': 'Future of Digital Marketing 2025',
     'meta_description': 'Stay ahead with the latest digital marketing trends and predictions for 2025.'},
    {'id': '3', 'title': 'Customer Service Excellence',
     'content': 'Draft content about providing exceptional customer service...',
     'excerpt': 'Tips for delivering outstanding customer service that builds loyalty.',
     'publish_date': '2025-01-20', 'status': 'draft',
     'meta_title': 'Customer Service Excellence Guide',
     'meta_description': 'Master the art of customer service with these proven strategies.'},
]

TESTIMONIALS = [
    {'id': '1', 'client_name': 'John Smith', 'company': 'Tech Solutions Inc.', 'rating': 5,
     'testimonial': 'Outstanding service and support. The team went above and beyond to deliver exactly what we needed.',
     'is_active': True, 'display_order': 1},
    {'id': '2', 'client_name': 'Sarah Johnson', 'company': 'Creative Agency', 'rating': 5,
     'testimonial': 'Professional, reliable, and innovative. Highly recommend their services to anyone looking for quality work.',
     'is_active': True, 'display_order': 2},
    {'id': '3', 'client_name': 'Mike Wilson', 'company': 'Startup Co.', 'rating': 4,
     'testimonial': 'Excellent communication throughout the project. The final result exceeded our expectations.',
     'is_active': False, 'display_order': 3},
]

TEAM = [
    {'id': '1', 'name': 'John Smith', 'position': 'CEO & Founder', 'display_order': 1, 'is_active': True,
     'bio': 'John has over 15 years of experience in technology and business development.'},
    {'id': '2', 'name': 'Sarah Johnson', 'position': 'Head of Operations', 'display_order': 2, 'is_active': True,
     'bio': 'Sarah leads our operations team and ensures smooth delivery of all projects.'},
    {'id': '3', 'name': 'Mike Wilson', 'position': 'Lead Developer', 'display_order': 3, 'is_active': True,
     'bio': 'Mike is our technical lead with expertise in modern web technologies.'},
    {'id': '4', 'name': 'Emma Davis', 'position': 'Marketing Director', 'display_order': 4, 'is_active': False,
     'bio': 'Emma drives our marketing initiatives and brand strategy.'},
]

SERVICES = [
    {'id': '1', 'name': 'Web Development', 'category': 'Development', 'price': 'Starting at $2,500',
     'description': 'Custom website development using modern technologies and frameworks.',
     'short_description': 'Build custom websites and web applications',
     'features': ['Responsive Design', 'SEO Optimized', 'Fast Loading', 'Mobile Friendly'],
     'display_order': 1, 'is_active': True},
    {'id': '2', 'name': 'Digital Marketing', 'category': 'Marketing', 'price': 'Starting at $1,200/month',
     'description': 'Comprehensive digital marketing strategies to grow your online presence.',
     'short_description': 'Boost your online visibility and reach',
     'features': ['SEO', 'Social Media', 'PPC Campaigns', 'Analytics'],
     'display_order': 2, 'is_active': True},
    {'id': '3', 'name': 'Branding & Design', 'category': 'Design', 'price': 'Starting at $800',
     'description': 'Professional branding and graphic design services for your business.',
     'short_description': 'Create a memorable brand identity',
     'features': ['Logo Design', 'Brand Guidelines', 'Marketing Materials', 'UI/UX Design'],
     'display_order': 3, 'is_active': True},
    {'id': '4', 'name': 'Consulting', 'category': 'Consulting', 'price': '$150/hour',
     'description': 'Strategic business consulting to help you make informed decisions.',
     'short_description': 'Expert business strategy guidance',
     'features': ['Strategy Planning', 'Market Analysis', 'Growth Planning', 'Risk Assessment'],
     'display_order': 4, 'is_active': False},
]

USERS = [
    {'id': '1', 'name': 'John Admin', 'email': 'admin@example.com', 'role': 'super_admin',
     'last_login': '2025-01-15 14:30', 'status': 'active', 'sites_access': ['all']},
    {'id': '2', 'name': 'Sarah Editor', 'email': 'sarah@example.com', 'role': 'admin',
     'last_login': '2025-01-15 10:20', 'status': 'active', 'sites_access': ['main-site']},
    {'id': '3', 'name': 'Mike Content', 'email': 'mike@example.com', 'role': 'editor',
     'last_login': '2025-01-14 16:45', 'status': 'active', 'sites_access': ['main-site']},
    {'id': '4', 'name': 'Emma Designer', 'email': 'emma@example.com', 'role': 'editor',
     'last_login': '2025-01-10 09:15', 'status': 'inactive', 'sites_access': ['design-site']},
]

SITES = [
    {'id': '1', 'name': 'Corporate Website', 'domain': 'mycompany.com',
     'description': 'Main corporate website with company information and services',
     'status': 'active', 'created_at': '2024-01-15', 'last_modified': '2024-09-10',
     'pages': 12, 'visits': 5420, 'leads': 89, 'is_default': True},
    {'id': '2', 'name': 'Product Landing', 'domain': 'product.mycompany.com',
     'description': 'Dedicated landing page for our flagship product',
     'status': 'active', 'created_at': '2024-03-20', 'last_modified': '2024-09-12',
     'pages': 6, 'visits': 2180, 'leads': 45},
    {'id': '3', 'name': 'Events Portal', 'domain': 'events.mycompany.com',
     'description': 'Event registration and information portal',
     'status': 'maintenance', 'created_at': '2024-06-10', 'last_modified': '2024-08-15',
     'pages': 8, 'visits': 890, 'leads': 23},
]

DEMO_DATA = {
    PAGE.name: PAGES,
    SUBMISSION.name: SUBMISSIONS,
    POST.name: POSTS,
    TESTIMONIAL.name: TESTIMONIALS,
    TEAM_MEMBER.name: TEAM,
    SERVICE.name: SERVICES,
    USER.name: USERS,
    SITE.name: SITES,
}


def complete_records(schema, rows):
    """Fill every schema field the seed rows leave out"""
    return [dict(schema.defaults(), **row) for row in rows]


def settings_records(schema):
    return [dict(schema.defaults(), id='current')]


def demo_records(schema):
    return complete_records(schema, DEMO_DATA.get(schema.name, []))


